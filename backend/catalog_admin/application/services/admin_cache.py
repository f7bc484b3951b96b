"""Cache-aside layer for admin-facing collection caches.

Fail-open: every backing-store failure is logged and degrades to "no effect"
(a miss on read, a no-op on write/delete). Nothing here raises ``CacheError``.

The cache has no view of database writes. Services that change cached data
call ``invalidate()`` themselves after their transaction commits.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from catalog_admin.application.interfaces import KeyValueStore
from catalog_admin.domain.exceptions import CacheError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ANALYTICS_TTL = 300


class AdminCache:
    """Read-through key/value cache for admin collection data.

    Usage:
        cache = AdminCache(store, namespace="admin")
        stats = await cache.get_cached_analytics()
        if stats is None:
            stats = await compute()
            await cache.set_cached_analytics(stats)
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        namespace: str = "admin",
        analytics_ttl: int = DEFAULT_ANALYTICS_TTL,
    ):
        self._store = store
        self.analytics_key = f"{namespace}:analytics"
        # Filled by the user-management screens; cleared here after product writes.
        self.users_key = f"{namespace}:users"
        self.analytics_ttl = analytics_ttl

    @property
    def collection_keys(self) -> tuple[str, ...]:
        """Every collection-level key cleared by a bare ``invalidate()``."""
        return (self.analytics_key, self.users_key)

    # ── Generic operations ───────────────────────────────────────────

    async def get(self, key: str) -> Any | None:
        """Return the cached value, or None on miss, expiry or cache outage."""
        try:
            raw = await self._store.get(key)
        except CacheError as exc:
            logger.warning("Cache get failed for '%s' — treating as miss: %s", key, exc.reason)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding undecodable cache entry '%s'", key)
            return None

    async def set_with_ttl(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Best-effort write with expiry."""
        try:
            payload = json.dumps(value, default=str)
            await self._store.set(key, payload, ttl_seconds=ttl_seconds)
        except CacheError as exc:
            logger.warning("Cache set failed for '%s': %s", key, exc.reason)
        except (TypeError, ValueError) as exc:
            logger.warning("Value for '%s' is not serialisable, not cached: %s", key, exc)

    async def invalidate(self, key: str | None = None) -> None:
        """Delete one key, or every collection-level key when ``key`` is None."""
        keys = (key,) if key else self.collection_keys
        try:
            await self._store.delete(*keys)
        except CacheError as exc:
            logger.warning("Cache invalidation failed for %s: %s", ", ".join(keys), exc.reason)
            return
        logger.debug("Invalidated cache keys: %s", ", ".join(keys))

    async def get_or_load(
        self, key: str, ttl_seconds: int, loader: Callable[[], Awaitable[T]]
    ) -> T | Any:
        """Return the cached value, or load it, cache it and return it.

        Loader errors propagate; cache errors never do.
        """
        cached = await self.get(key)
        if cached is not None:
            return cached
        value = await loader()
        await self.set_with_ttl(key, value, ttl_seconds)
        return value

    # ── Collection caches ────────────────────────────────────────────

    async def get_cached_analytics(self) -> Any | None:
        return await self.get(self.analytics_key)

    async def set_cached_analytics(self, data: Any) -> None:
        await self.set_with_ttl(self.analytics_key, data, self.analytics_ttl)
