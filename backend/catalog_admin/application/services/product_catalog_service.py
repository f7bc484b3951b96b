"""Read side of the admin catalog: current pricing, specifications, analytics."""

from dataclasses import dataclass

from catalog_admin.application.interfaces import TransactionRunner, UnitOfWork
from catalog_admin.application.services.admin_cache import AdminCache
from catalog_admin.domain.entities import (
    CatalogAnalytics,
    PriceTier,
    ProductPricing,
    ProductSpecification,
)
from catalog_admin.domain.exceptions import EntityNotFoundError


@dataclass
class PricingView:
    pricing: ProductPricing
    tiers: list[PriceTier]


class ProductCatalogService:
    """Queries for the admin UI. Analytics go through the admin cache."""

    def __init__(self, transaction_runner: TransactionRunner, cache: AdminCache):
        self._runner = transaction_runner
        self._cache = cache

    async def get_pricing(self, product_id: str) -> PricingView:
        async def work(uow: UnitOfWork) -> PricingView:
            pricing = await uow.products.get_pricing(product_id)
            if pricing is None:
                raise EntityNotFoundError("Product", product_id)
            return PricingView(pricing, await uow.price_tiers.list_for_parent(product_id))

        return await self._runner.run_in_transaction(work)

    async def get_specifications(self, product_id: str) -> list[ProductSpecification]:
        async def work(uow: UnitOfWork) -> list[ProductSpecification]:
            if await uow.products.get_pricing(product_id) is None:
                raise EntityNotFoundError("Product", product_id)
            return await uow.specifications.list_for_parent(product_id)

        return await self._runner.run_in_transaction(work)

    async def get_analytics(self) -> CatalogAnalytics:
        """Catalog counts, served from cache for up to the analytics TTL."""

        async def load() -> dict:
            async def work(uow: UnitOfWork) -> CatalogAnalytics:
                return await uow.products.get_analytics()

            analytics = await self._runner.run_in_transaction(work)
            return analytics.to_dict()

        raw = await self._cache.get_or_load(
            self._cache.analytics_key, self._cache.analytics_ttl, load
        )
        return CatalogAnalytics.from_dict(raw)
