"""Abstract repository interface (port) for a product's dependent child rows."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RowT = TypeVar("RowT")


class ChildRowRepository(ABC, Generic[RowT]):
    """Port for one dependent-row collection (price tiers, specifications).

    Implementations must be bound to an active transaction; they never commit.
    """

    #: Prefix for generated ids, or None for plain UUIDs.
    id_prefix: str | None = None

    @abstractmethod
    async def list_for_parent(self, parent_id: str) -> list[RowT]:
        """Return the parent's rows ordered by display order."""
        ...

    @abstractmethod
    async def delete_for_parent(self, parent_id: str) -> int:
        """Delete every row owned by the parent. Returns the number deleted."""
        ...

    @abstractmethod
    async def insert(self, row: RowT) -> RowT:
        """Insert one fully-populated row (id and parent already resolved)."""
        ...
