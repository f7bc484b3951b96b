"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from catalog_admin.presentation.api.v1.endpoints.admin_dashboard import router as admin_dashboard_router
from catalog_admin.presentation.api.v1.endpoints.admin_products import router as admin_products_router
from catalog_admin.presentation.api.v1.endpoints.health import router as health_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(admin_products_router)
router.include_router(admin_dashboard_router)
