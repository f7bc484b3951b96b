"""Transaction ports — a unit of work and the runner that scopes it."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TypeVar

from catalog_admin.application.interfaces.child_row_repository import ChildRowRepository
from catalog_admin.application.interfaces.product_repository import ProductRepository
from catalog_admin.domain.entities import PriceTier, ProductSpecification

T = TypeVar("T")


class UnitOfWork(ABC):
    """Repositories bound to one open transaction.

    A UnitOfWork is only valid inside the ``work`` callable it was handed to.
    """

    products: ProductRepository
    price_tiers: ChildRowRepository[PriceTier]
    specifications: ChildRowRepository[ProductSpecification]


class TransactionRunner(ABC):
    """Port for scoped transaction acquisition over the relational store."""

    @abstractmethod
    async def run_in_transaction(self, work: Callable[[UnitOfWork], Awaitable[T]]) -> T:
        """Run ``work`` inside one transaction.

        Commits when ``work`` returns, rolls back on any exception or
        cancellation. Domain exceptions propagate unchanged; other failures
        surface as ``TransactionError``. Never retries.
        """
        ...
