"""In-process implementation of the KeyValueStore port.

Mirrors the subset of Redis semantics the cache and activity log rely on
(TTL expiry, LPUSH/LTRIM/LRANGE with inclusive and negative indices). Every
method completes without awaiting, so each call is atomic on the event loop.
Only suitable for tests and single-worker development.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

from catalog_admin.application.interfaces import KeyValueStore
from catalog_admin.domain.exceptions import CacheError


@dataclass
class _Entry:
    value: str | list[str]
    expires_at: float | None = None


def _redis_range(start: int, stop: int, length: int) -> slice:
    """Translate Redis inclusive (possibly negative) indices into a slice."""
    if start < 0:
        start = max(length + start, 0)
    if stop < 0:
        stop = length + stop
    return slice(start, max(stop + 1, start))


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._data: dict[str, _Entry] = {}

    def _live(self, key: str) -> _Entry | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            del self._data[key]
            return None
        return entry

    def _list(self, operation: str, key: str) -> list[str] | None:
        entry = self._live(key)
        if entry is None:
            return None
        if not isinstance(entry.value, list):
            raise CacheError(operation, key, "WRONGTYPE key holds a string")
        return entry.value

    async def get(self, key: str) -> str | None:
        entry = self._live(key)
        if entry is None:
            return None
        if isinstance(entry.value, list):
            raise CacheError("GET", key, "WRONGTYPE key holds a list")
        return entry.value

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        if ttl_seconds is None:
            expires_at = None
        elif ttl_seconds <= 0:
            # Redis rejects SET ... EX 0 and writes nothing.
            raise CacheError("SET", key, "invalid expire time in 'set' command")
        else:
            expires_at = self._clock() + ttl_seconds
        self._data[key] = _Entry(value, expires_at)

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self._live(key) is not None:
                del self._data[key]
                removed += 1
        return removed

    async def lpush(self, key: str, value: str) -> int:
        items = self._list("LPUSH", key)
        if items is None:
            items = []
            self._data[key] = _Entry(items)
        items.insert(0, value)
        return len(items)

    async def ltrim(self, key: str, start: int, stop: int) -> None:
        items = self._list("LTRIM", key)
        if items is None:
            return
        kept = items[_redis_range(start, stop, len(items))]
        if kept:
            items[:] = kept
        else:
            del self._data[key]

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        items = self._list("LRANGE", key)
        if items is None:
            return []
        return list(items[_redis_range(start, stop, len(items))])
