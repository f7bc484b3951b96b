"""Product update service — validated, transactional writes of pricing and specifications.

Request lifecycle:
    VALIDATING → IN_TRANSACTION → COMMITTED → CACHE_INVALIDATED → LOGGED → SUCCEEDED
    VALIDATING → REJECTED                      (bad input / not an admin)
    IN_TRANSACTION → ROLLED_BACK               (missing product / store failure)
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

import pydantic

from catalog_admin.application.interfaces import TransactionRunner, UnitOfWork
from catalog_admin.application.schemas.product import PricingUpdate, SpecificationsUpdate
from catalog_admin.application.services.activity_log import ActivityLog
from catalog_admin.application.services.admin_cache import AdminCache
from catalog_admin.application.services.collection_replacer import CollectionReplacer
from catalog_admin.domain.entities import (
    Actor,
    PriceTier,
    ProductPricing,
    ProductSpecification,
)
from catalog_admin.domain.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    ValidationError,
)
from catalog_admin.infrastructure.logging.colored_logger import UpdateLogger, UpdateStage

logger = logging.getLogger(__name__)
ulog = UpdateLogger("ProductUpdateService")

M = TypeVar("M", bound=pydantic.BaseModel)

ACTION_PRICING_UPDATE = "product.pricing.update"
ACTION_SPECIFICATIONS_UPDATE = "product.specifications.update"


@dataclass
class UpdateResult:
    """Outcome of a committed update."""

    product_id: str
    rows: list[Any] = field(default_factory=list)

    @property
    def rows_written(self) -> int:
        return len(self.rows)


class ProductUpdateService:
    """Orchestrates product writes: validate, transact, invalidate, record.

    Validation and authorization happen before a transaction is opened, so
    rejected requests have no side effects. Cache invalidation and activity
    logging run only after a successful commit and can never turn a
    committed update into a failure.
    """

    def __init__(
        self,
        transaction_runner: TransactionRunner,
        cache: AdminCache,
        activity_log: ActivityLog,
    ):
        self._runner = transaction_runner
        self._cache = cache
        self._activity = activity_log

    # ── Operations ───────────────────────────────────────────────────

    async def update_pricing(
        self,
        actor: Actor,
        product_id: str,
        payload: Mapping[str, Any] | PricingUpdate,
    ) -> UpdateResult:
        """Overwrite the pricing scalars and replace every price tier."""
        data = self._validate(actor, product_id, payload, PricingUpdate)
        pricing = ProductPricing(
            product_id=product_id,
            base_price=data.base_price,
            compare_at_price=data.compare_at_price,
            price_calculation_method=data.price_calculation_method or "per_piece",
        )
        tiers = [tier.to_entity() for tier in data.price_tiers]

        async def work(uow: UnitOfWork) -> list[PriceTier]:
            if not await uow.products.update_pricing(pricing):
                raise EntityNotFoundError("Product", product_id)
            return await CollectionReplacer(uow.price_tiers).replace_children(product_id, tiers)

        written = await self._transact(work, f"pricing of {product_id}", tiers=len(tiers))
        await self._after_commit(
            actor,
            ACTION_PRICING_UPDATE,
            f"product={product_id} base_price={pricing.base_price} tiers={len(written)}",
        )
        return UpdateResult(product_id=product_id, rows=written)

    async def update_specifications(
        self,
        actor: Actor,
        product_id: str,
        payload: Mapping[str, Any] | SpecificationsUpdate,
    ) -> UpdateResult:
        """Replace every specification line of a product."""
        data = self._validate(actor, product_id, payload, SpecificationsUpdate)
        specs = [spec.to_entity() for spec in data.specifications]

        async def work(uow: UnitOfWork) -> list[ProductSpecification]:
            if await uow.products.get_pricing(product_id) is None:
                raise EntityNotFoundError("Product", product_id)
            return await CollectionReplacer(uow.specifications).replace_children(product_id, specs)

        written = await self._transact(work, f"specifications of {product_id}", specs=len(specs))
        await self._after_commit(
            actor,
            ACTION_SPECIFICATIONS_UPDATE,
            f"product={product_id} specifications={len(written)}",
        )
        return UpdateResult(product_id=product_id, rows=written)

    # ── Stages ───────────────────────────────────────────────────────

    def _validate(
        self,
        actor: Actor,
        product_id: str,
        payload: Mapping[str, Any] | pydantic.BaseModel,
        schema: type[M],
    ) -> M:
        ulog.stage(UpdateStage.VALIDATING, schema.__name__, actor=actor.id, product=product_id)

        if not actor.is_admin:
            error = AuthorizationError()
            ulog.failure(UpdateStage.REJECTED, f"actor '{actor.id}' is not an admin")
            raise error

        if not product_id or not product_id.strip():
            error = ValidationError("Product ID is required")
            ulog.failure(UpdateStage.REJECTED, error.message)
            raise error

        if isinstance(payload, schema):
            return payload
        if not isinstance(payload, Mapping):
            error = ValidationError("Request body must be a JSON object")
            ulog.failure(UpdateStage.REJECTED, error.message)
            raise error
        try:
            return schema.model_validate(payload)
        except pydantic.ValidationError as exc:
            error = ValidationError(_describe_validation_error(exc))
            ulog.failure(UpdateStage.REJECTED, error.message)
            raise error from exc

    async def _transact(
        self, work: Callable[[UnitOfWork], Awaitable[list[Any]]], label: str, **kwargs: Any
    ) -> list[Any]:
        with ulog.timed_step(UpdateStage.IN_TRANSACTION, label, **kwargs):
            return await self._runner.run_in_transaction(work)

    async def _after_commit(self, actor: Actor, action: str, detail: str) -> None:
        # Both calls are fail-open; neither can undo or fail the commit.
        await self._cache.invalidate()
        ulog.stage(UpdateStage.CACHE_INVALIDATED, "admin collection caches cleared")

        await self._activity.record(actor.id, action, detail)
        ulog.stage(UpdateStage.LOGGED, action, actor=actor.id)
        ulog.stage(UpdateStage.SUCCEEDED, detail)


def _describe_validation_error(exc: pydantic.ValidationError) -> str:
    """Flatten pydantic errors into one readable message."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}" if location else err.get("msg", ""))
    return "; ".join(parts) or "Invalid request"
