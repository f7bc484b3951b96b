"""Scoped transactions over SQLAlchemy async sessions."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_admin.application.interfaces import TransactionRunner, UnitOfWork
from catalog_admin.domain.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    TransactionError,
    ValidationError,
)
from catalog_admin.infrastructure.database.repositories import (
    SQLAlchemyPriceTierRepository,
    SQLAlchemyProductRepository,
    SQLAlchemySpecificationRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Raised deliberately by work functions to abort; re-raised as-is after rollback.
_PASSTHROUGH_ERRORS = (
    AuthorizationError,
    EntityNotFoundError,
    TransactionError,
    ValidationError,
)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Repositories sharing one AsyncSession (and so one transaction)."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.products = SQLAlchemyProductRepository(session)
        self.price_tiers = SQLAlchemyPriceTierRepository(session)
        self.specifications = SQLAlchemySpecificationRepository(session)


class SQLAlchemyTransactionRunner(TransactionRunner):
    """Implements TransactionRunner: one session, one transaction per call.

    Exactly one of commit / rollback runs per invocation, including when the
    awaiting task is cancelled mid-work. The session is always closed.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def run_in_transaction(self, work: Callable[[UnitOfWork], Awaitable[T]]) -> T:
        async with self._session_factory() as session:
            try:
                result = await work(SQLAlchemyUnitOfWork(session))
                await session.commit()
            except _PASSTHROUGH_ERRORS:
                await session.rollback()
                raise
            except Exception as exc:
                await session.rollback()
                logger.warning("Transaction rolled back: %s: %s", type(exc).__name__, exc)
                raise TransactionError(str(exc) or type(exc).__name__) from exc
            except BaseException:
                # Cancellation / interpreter shutdown: never leave the transaction open.
                await session.rollback()
                raise
            return result
