from .child_row_repositories import (
    SQLAlchemyPriceTierRepository,
    SQLAlchemySpecificationRepository,
)
from .product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyPriceTierRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemySpecificationRepository",
]
