from .activity_log import ActivityLog
from .admin_cache import AdminCache
from .collection_replacer import CollectionReplacer
from .product_catalog_service import PricingView, ProductCatalogService
from .product_update_service import ProductUpdateService, UpdateResult

__all__ = [
    "ActivityLog",
    "AdminCache",
    "CollectionReplacer",
    "PricingView",
    "ProductCatalogService",
    "ProductUpdateService",
    "UpdateResult",
]
