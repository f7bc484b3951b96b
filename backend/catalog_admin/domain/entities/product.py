"""Domain entities for products and their dependent child collections."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

# Id value the admin UI sends for rows that have not been persisted yet.
NEW_ROW_ID = "new"


def resolve_child_id(candidate: str | None, prefix: str | None = None) -> str:
    """Keep a caller-supplied child id, or mint a fresh one.

    Missing, empty and ``"new"`` ids are replaced; anything else is preserved
    verbatim so rows keep their identity across a replace.
    """
    if candidate and candidate != NEW_ROW_ID:
        return candidate
    generated = uuid4().hex if prefix else str(uuid4())
    return f"{prefix}-{generated}" if prefix else generated


@dataclass
class ProductPricing:
    """The scalar pricing fields of a product, mutated as one unit."""

    product_id: str
    base_price: float
    compare_at_price: float | None = None
    price_calculation_method: str = "per_piece"
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class PriceTier:
    """Quantity-based price tier owned by a product."""

    min_quantity: int
    price_per_unit: float
    display_order: int = 0
    max_quantity: int | None = None
    discount_percent: float | None = None
    id: str | None = None
    product_id: str | None = None


@dataclass
class ProductSpecification:
    """Key/label/value specification line shown on a product page."""

    spec_key: str
    spec_label: str
    spec_value: str
    display_order: int = 0
    id: str | None = None
    product_id: str | None = None
