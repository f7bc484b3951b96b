"""SQLAlchemy repositories for a product's dependent child rows.

Both repositories share one delete/insert/list implementation; they differ
only in the ORM model and the entity mapping.
"""

from typing import Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.application.interfaces import ChildRowRepository
from catalog_admin.domain.entities import PriceTier, ProductSpecification
from catalog_admin.infrastructure.database.base import Base
from catalog_admin.infrastructure.database.models import (
    PriceTierModel,
    ProductSpecificationModel,
)

RowT = TypeVar("RowT")
ModelT = TypeVar("ModelT", bound=Base)


class _SQLAlchemyChildRowRepository(ChildRowRepository[RowT], Generic[RowT, ModelT]):
    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ModelT) -> RowT:
        raise NotImplementedError

    def _to_model(self, entity: RowT) -> ModelT:
        raise NotImplementedError

    async def list_for_parent(self, parent_id: str) -> list[RowT]:
        stmt = (
            select(self.model)
            .where(self.model.product_id == parent_id)
            .order_by(self.model.display_order.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def delete_for_parent(self, parent_id: str) -> int:
        stmt = delete(self.model).where(self.model.product_id == parent_id)
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def insert(self, row: RowT) -> RowT:
        model = self._to_model(row)
        self._session.add(model)
        # Flush per row so a failing insert surfaces here, not at commit.
        await self._session.flush()
        return self._to_entity(model)


class SQLAlchemyPriceTierRepository(_SQLAlchemyChildRowRepository[PriceTier, PriceTierModel]):
    """Implements ChildRowRepository[PriceTier] for the 'price_tiers' table."""

    model = PriceTierModel

    def _to_entity(self, model: PriceTierModel) -> PriceTier:
        return PriceTier(
            id=model.id,
            product_id=model.product_id,
            min_quantity=model.min_quantity,
            max_quantity=model.max_quantity,
            discount_percent=model.discount_percent,
            price_per_unit=model.price_per_unit,
            display_order=model.display_order,
        )

    def _to_model(self, entity: PriceTier) -> PriceTierModel:
        return PriceTierModel(
            id=entity.id,
            product_id=entity.product_id,
            min_quantity=entity.min_quantity,
            max_quantity=entity.max_quantity,
            discount_percent=entity.discount_percent,
            price_per_unit=entity.price_per_unit,
            display_order=entity.display_order,
        )


class SQLAlchemySpecificationRepository(
    _SQLAlchemyChildRowRepository[ProductSpecification, ProductSpecificationModel]
):
    """Implements ChildRowRepository[ProductSpecification] for 'product_specifications'."""

    model = ProductSpecificationModel
    id_prefix = "spec"

    def _to_entity(self, model: ProductSpecificationModel) -> ProductSpecification:
        return ProductSpecification(
            id=model.id,
            product_id=model.product_id,
            spec_key=model.spec_key,
            spec_label=model.spec_label,
            spec_value=model.spec_value,
            display_order=model.display_order,
        )

    def _to_model(self, entity: ProductSpecification) -> ProductSpecificationModel:
        return ProductSpecificationModel(
            id=entity.id,
            product_id=entity.product_id,
            spec_key=entity.spec_key,
            spec_label=entity.spec_label,
            spec_value=entity.spec_value,
            display_order=entity.display_order,
        )
