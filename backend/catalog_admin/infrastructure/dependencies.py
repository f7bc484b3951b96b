"""FastAPI dependency injection — wires infrastructure to application layer."""

from functools import lru_cache

from catalog_admin.application.interfaces import KeyValueStore, TransactionRunner
from catalog_admin.application.services import (
    ActivityLog,
    AdminCache,
    ProductCatalogService,
    ProductUpdateService,
)
from catalog_admin.config import get_settings
from catalog_admin.infrastructure.cache import InMemoryKeyValueStore, RedisKeyValueStore
from catalog_admin.infrastructure.database.session import async_session_factory
from catalog_admin.infrastructure.database.transaction import SQLAlchemyTransactionRunner

_MEMORY_URL = "memory://"


# ── Process-wide singletons ─────────────────────────────────────────


@lru_cache
def get_key_value_store() -> KeyValueStore:
    """Shared key/value backend for the admin cache and activity log."""
    settings = get_settings()
    if settings.redis_url.startswith(_MEMORY_URL):
        return InMemoryKeyValueStore()
    return RedisKeyValueStore.from_url(
        settings.redis_url, socket_timeout=settings.redis_socket_timeout
    )


@lru_cache
def get_admin_cache() -> AdminCache:
    settings = get_settings()
    return AdminCache(
        get_key_value_store(),
        namespace=settings.cache_namespace,
        analytics_ttl=settings.cache_ttl_analytics,
    )


@lru_cache
def get_activity_log() -> ActivityLog:
    settings = get_settings()
    return ActivityLog(
        get_key_value_store(),
        namespace=settings.cache_namespace,
        max_entries=settings.activity_max_entries,
        default_limit=settings.activity_default_limit,
    )


@lru_cache
def get_transaction_runner() -> TransactionRunner:
    return SQLAlchemyTransactionRunner(async_session_factory)


# ── Per-request services ────────────────────────────────────────────


def get_product_update_service() -> ProductUpdateService:
    """Provides a ProductUpdateService wired to the shared runner, cache and log."""
    return ProductUpdateService(
        transaction_runner=get_transaction_runner(),
        cache=get_admin_cache(),
        activity_log=get_activity_log(),
    )


def get_product_catalog_service() -> ProductCatalogService:
    """Provides the read-side ProductCatalogService."""
    return ProductCatalogService(
        transaction_runner=get_transaction_runner(),
        cache=get_admin_cache(),
    )
