"""Pydantic DTOs for the product pricing and specification admin endpoints.

Input schemas accept both snake_case and the camelCase keys sent by the
admin UI (``basePrice``, ``priceTiers``, ``displayOrder`` ...).
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from catalog_admin.domain.entities import PriceTier, ProductSpecification

_INPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    allow_inf_nan=False,
    extra="ignore",
)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _null_to_zero(value: Any) -> Any:
    return 0 if value is None else value


def _reject_bool(value: Any) -> Any:
    # Lax mode would read true/false as 1/0.
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


# The admin UI posts "" for cleared optional inputs.
BlankAsNone = BeforeValidator(_blank_to_none)
NotBool = BeforeValidator(_reject_bool)
Number = Annotated[float, NotBool]
Count = Annotated[int, NotBool]
DisplayOrder = Annotated[int, NotBool, BeforeValidator(_null_to_zero)]


class PriceTierInput(BaseModel):
    """One submitted price tier. ``id`` may be omitted or ``"new"``."""

    model_config = _INPUT_CONFIG

    id: Annotated[str | None, BlankAsNone] = None
    min_quantity: Count
    max_quantity: Annotated[int | None, NotBool, BlankAsNone] = None
    discount_percent: Annotated[float | None, NotBool, BlankAsNone] = None
    price_per_unit: Number
    display_order: DisplayOrder = 0

    def to_entity(self) -> PriceTier:
        return PriceTier(
            id=self.id,
            min_quantity=self.min_quantity,
            max_quantity=self.max_quantity,
            discount_percent=self.discount_percent,
            price_per_unit=self.price_per_unit,
            display_order=self.display_order,
        )


class PricingUpdate(BaseModel):
    """Payload for PUT /admin/products/{id}/pricing.

    An omitted ``price_tiers`` list clears every tier of the product.
    """

    model_config = _INPUT_CONFIG

    base_price: Number
    compare_at_price: Annotated[float | None, NotBool, BlankAsNone] = None
    price_calculation_method: Annotated[str | None, BlankAsNone] = None
    price_tiers: list[PriceTierInput] = Field(default_factory=list)

    @field_validator("price_tiers", mode="before")
    @classmethod
    def null_tiers_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SpecificationInput(BaseModel):
    """One submitted specification line. ``id`` may be omitted or ``"new"``."""

    model_config = _INPUT_CONFIG

    id: Annotated[str | None, BlankAsNone] = None
    spec_key: str
    spec_label: str
    spec_value: str
    display_order: DisplayOrder = 0

    def to_entity(self) -> ProductSpecification:
        return ProductSpecification(
            id=self.id,
            spec_key=self.spec_key,
            spec_label=self.spec_label,
            spec_value=self.spec_value,
            display_order=self.display_order,
        )


class SpecificationsUpdate(BaseModel):
    """Payload for PUT /admin/products/{id}/specifications."""

    model_config = _INPUT_CONFIG

    specifications: list[SpecificationInput] = Field(default_factory=list)

    @field_validator("specifications", mode="before")
    @classmethod
    def null_specs_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# ── Responses ──


class PriceTierResponse(BaseModel):
    id: str
    min_quantity: int
    max_quantity: int | None
    discount_percent: float | None
    price_per_unit: float
    display_order: int

    model_config = {"from_attributes": True}


class PricingResponse(BaseModel):
    """Current pricing of a product with its tiers in display order."""

    product_id: str
    base_price: float
    compare_at_price: float | None
    price_calculation_method: str
    updated_at: datetime
    price_tiers: list[PriceTierResponse]


class SpecificationResponse(BaseModel):
    id: str
    spec_key: str
    spec_label: str
    spec_value: str
    display_order: int

    model_config = {"from_attributes": True}


class UpdateResultResponse(BaseModel):
    """Data payload of a successful update."""

    id: str
    rows_written: int
