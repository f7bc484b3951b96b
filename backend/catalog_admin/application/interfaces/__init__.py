from .child_row_repository import ChildRowRepository
from .key_value_store import KeyValueStore
from .product_repository import ProductRepository
from .unit_of_work import TransactionRunner, UnitOfWork

__all__ = [
    "ChildRowRepository",
    "KeyValueStore",
    "ProductRepository",
    "TransactionRunner",
    "UnitOfWork",
]
