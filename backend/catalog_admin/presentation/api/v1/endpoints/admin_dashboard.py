"""Admin dashboard endpoints — cached catalog analytics and the caller's activity."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from catalog_admin.application.schemas import ActivityRecordResponse, CatalogAnalyticsResponse
from catalog_admin.application.services import ActivityLog, ProductCatalogService
from catalog_admin.domain.entities import Actor
from catalog_admin.infrastructure.dependencies import (
    get_activity_log,
    get_product_catalog_service,
)
from catalog_admin.presentation.api.actor import get_admin_actor
from catalog_admin.presentation.api.responses import success

router = APIRouter(prefix="/admin", tags=["Admin Dashboard"])


@router.get("/analytics")
async def get_analytics(
    _: Actor = Depends(get_admin_actor),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> JSONResponse:
    """Catalog counts, served from the analytics cache when warm."""
    analytics = await service.get_analytics()
    return success(CatalogAnalyticsResponse.model_validate(analytics))


@router.get("/activity")
async def get_activity(
    limit: int | None = Query(None, ge=1, le=100),
    actor: Actor = Depends(get_admin_actor),
    activity_log: ActivityLog = Depends(get_activity_log),
) -> JSONResponse:
    """Most recent actions of the calling admin, newest first."""
    records = await activity_log.recent(actor.id, limit)
    return success([ActivityRecordResponse.model_validate(r) for r in records])
