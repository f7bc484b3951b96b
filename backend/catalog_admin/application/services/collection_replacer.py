"""Delete-then-insert replacement of a product's dependent child rows."""

import dataclasses
import logging
from typing import Generic, TypeVar

from catalog_admin.application.interfaces import ChildRowRepository
from catalog_admin.domain.entities import resolve_child_id

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT")


class CollectionReplacer(Generic[RowT]):
    """Replaces the full child collection of one parent.

    Must be handed a repository bound to an open transaction: the delete and
    the inserts only become visible together, on commit. Rows are written in
    submitted order with every field verbatim; display order is neither
    sorted, deduplicated nor validated.
    """

    def __init__(self, repository: ChildRowRepository[RowT]):
        self._repository = repository

    async def replace_children(self, parent_id: str, rows: list[RowT]) -> list[RowT]:
        deleted = await self._repository.delete_for_parent(parent_id)

        written: list[RowT] = []
        for row in rows:
            prepared = dataclasses.replace(
                row,
                id=resolve_child_id(row.id, self._repository.id_prefix),
                product_id=parent_id,
            )
            written.append(await self._repository.insert(prepared))

        logger.debug(
            "Replaced children of %s: deleted=%d inserted=%d",
            parent_id, deleted, len(written),
        )
        return written
