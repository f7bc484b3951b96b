"""Admin endpoints for product pricing and specifications."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from catalog_admin.application.schemas import (
    PriceTierResponse,
    PricingResponse,
    SpecificationResponse,
    UpdateResultResponse,
)
from catalog_admin.application.services import ProductCatalogService, ProductUpdateService
from catalog_admin.domain.entities import Actor
from catalog_admin.infrastructure.dependencies import (
    get_product_catalog_service,
    get_product_update_service,
)
from catalog_admin.presentation.api.actor import get_admin_actor, get_current_actor
from catalog_admin.presentation.api.responses import success

router = APIRouter(prefix="/admin/products", tags=["Admin Products"])


@router.put("/{product_id}/pricing")
async def update_pricing(
    product_id: str,
    payload: dict[str, Any] = Body(...),
    actor: Actor = Depends(get_current_actor),
    service: ProductUpdateService = Depends(get_product_update_service),
) -> JSONResponse:
    """Update basePrice / compareAtPrice / priceCalculationMethod and replace all price tiers."""
    result = await service.update_pricing(actor, product_id, payload)
    return success(UpdateResultResponse(id=result.product_id, rows_written=result.rows_written))


@router.put("/{product_id}/specifications")
async def update_specifications(
    product_id: str,
    payload: dict[str, Any] = Body(...),
    actor: Actor = Depends(get_current_actor),
    service: ProductUpdateService = Depends(get_product_update_service),
) -> JSONResponse:
    """Replace every specification line of a product."""
    result = await service.update_specifications(actor, product_id, payload)
    return success(UpdateResultResponse(id=result.product_id, rows_written=result.rows_written))


@router.get("/{product_id}/pricing")
async def get_pricing(
    product_id: str,
    _: Actor = Depends(get_admin_actor),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> JSONResponse:
    """Current pricing of a product with its tiers in display order."""
    view = await service.get_pricing(product_id)
    pricing = view.pricing
    return success(
        PricingResponse(
            product_id=pricing.product_id,
            base_price=pricing.base_price,
            compare_at_price=pricing.compare_at_price,
            price_calculation_method=pricing.price_calculation_method,
            updated_at=pricing.updated_at,
            price_tiers=[PriceTierResponse.model_validate(t) for t in view.tiers],
        )
    )


@router.get("/{product_id}/specifications")
async def get_specifications(
    product_id: str,
    _: Actor = Depends(get_admin_actor),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> JSONResponse:
    """Specification lines of a product in display order."""
    specs = await service.get_specifications(product_id)
    return success([SpecificationResponse.model_validate(s) for s in specs])
