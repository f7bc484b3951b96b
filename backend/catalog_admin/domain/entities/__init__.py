from .activity import ActivityRecord, Actor
from .analytics import CatalogAnalytics
from .product import (
    NEW_ROW_ID,
    PriceTier,
    ProductPricing,
    ProductSpecification,
    resolve_child_id,
)

__all__ = [
    "ActivityRecord",
    "Actor",
    "CatalogAnalytics",
    "NEW_ROW_ID",
    "PriceTier",
    "ProductPricing",
    "ProductSpecification",
    "resolve_child_id",
]
