"""Pydantic DTOs for the admin activity and analytics endpoints."""

from datetime import datetime

from pydantic import BaseModel


class ActivityRecordResponse(BaseModel):
    actor_id: str
    action: str
    detail: str | None
    timestamp: datetime

    model_config = {"from_attributes": True}


class CatalogAnalyticsResponse(BaseModel):
    total_products: int
    active_products: int
    total_price_tiers: int
    total_specifications: int

    model_config = {"from_attributes": True}
