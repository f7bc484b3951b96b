"""Domain entity — aggregate catalog counts shown on the admin dashboard."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class CatalogAnalytics:
    """Snapshot of catalog size, cached under the analytics key."""

    total_products: int = 0
    active_products: int = 0
    total_price_tiers: int = 0
    total_specifications: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CatalogAnalytics":
        return cls(**raw)
