from .activity import ActivityRecordResponse, CatalogAnalyticsResponse
from .product import (
    PriceTierInput,
    PriceTierResponse,
    PricingResponse,
    PricingUpdate,
    SpecificationInput,
    SpecificationResponse,
    SpecificationsUpdate,
    UpdateResultResponse,
)

__all__ = [
    "ActivityRecordResponse",
    "CatalogAnalyticsResponse",
    "PriceTierInput",
    "PriceTierResponse",
    "PricingResponse",
    "PricingUpdate",
    "SpecificationInput",
    "SpecificationResponse",
    "SpecificationsUpdate",
    "UpdateResultResponse",
]
