"""Abstract repository interface (port) for product pricing persistence."""

from abc import ABC, abstractmethod

from catalog_admin.domain.entities import CatalogAnalytics, ProductPricing


class ProductRepository(ABC):
    """Port for the product's scalar fields — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_pricing(self, product_id: str) -> ProductPricing | None:
        """Retrieve the pricing scalars of a product, or None if it does not exist."""
        ...

    @abstractmethod
    async def update_pricing(self, pricing: ProductPricing) -> bool:
        """Overwrite the pricing scalars. Returns False if the product does not exist."""
        ...

    @abstractmethod
    async def get_analytics(self) -> CatalogAnalytics:
        """Count products, active products, tiers and specifications."""
        ...
