"""Concrete repository implementation for product pricing backed by SQLAlchemy."""

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.application.interfaces import ProductRepository
from catalog_admin.domain.entities import CatalogAnalytics, ProductPricing
from catalog_admin.infrastructure.database.models import (
    PriceTierModel,
    ProductModel,
    ProductSpecificationModel,
)


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProductModel) -> ProductPricing:
        """Map ORM model → domain pricing entity."""
        return ProductPricing(
            product_id=model.id,
            base_price=model.base_price,
            compare_at_price=model.compare_at_price,
            price_calculation_method=model.price_calculation_method,
            updated_at=model.updated_at,
        )

    async def get_pricing(self, product_id: str) -> ProductPricing | None:
        result = await self._session.get(ProductModel, product_id)
        return self._to_entity(result) if result else None

    async def update_pricing(self, pricing: ProductPricing) -> bool:
        # Plain UPDATE: takes the product row lock for the rest of the transaction.
        stmt = (
            update(ProductModel)
            .where(ProductModel.id == pricing.product_id)
            .values(
                base_price=pricing.base_price,
                compare_at_price=pricing.compare_at_price,
                price_calculation_method=pricing.price_calculation_method,
                updated_at=pricing.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def get_analytics(self) -> CatalogAnalytics:
        total_products = await self._count(select(func.count()).select_from(ProductModel))
        active_products = await self._count(
            select(func.count()).select_from(ProductModel).where(ProductModel.is_active.is_(True))
        )
        total_tiers = await self._count(select(func.count()).select_from(PriceTierModel))
        total_specs = await self._count(
            select(func.count()).select_from(ProductSpecificationModel)
        )
        return CatalogAnalytics(
            total_products=total_products,
            active_products=active_products,
            total_price_tiers=total_tiers,
            total_specifications=total_specs,
        )

    async def _count(self, stmt) -> int:
        result = await self._session.execute(stmt)
        return int(result.scalar_one())
