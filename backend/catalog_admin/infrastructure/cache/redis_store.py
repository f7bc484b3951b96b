"""Redis-backed implementation of the KeyValueStore port."""

import logging

from redis.asyncio import Redis, from_url
from redis.exceptions import RedisError

from catalog_admin.application.interfaces import KeyValueStore
from catalog_admin.domain.exceptions import CacheError

logger = logging.getLogger(__name__)

# decode_responses=True surfaces non-UTF-8 payloads as UnicodeDecodeError.
_STORE_ERRORS = (RedisError, OSError, UnicodeDecodeError)


class RedisKeyValueStore(KeyValueStore):
    """Adapter over ``redis.asyncio``.

    Every command is a single atomic Redis operation. Driver errors are
    re-raised as ``CacheError`` so callers never depend on redis-py types.
    """

    def __init__(self, client: Redis):
        self._redis = client

    @classmethod
    def from_url(cls, url: str, *, socket_timeout: float | None = None) -> "RedisKeyValueStore":
        logger.info("Connecting to Redis at %s", url.rsplit("@", 1)[-1])
        return cls(from_url(url, decode_responses=True, socket_timeout=socket_timeout))

    async def get(self, key: str) -> str | None:
        try:
            return await self._redis.get(key)
        except _STORE_ERRORS as exc:
            raise CacheError("GET", key, str(exc)) from exc

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        try:
            await self._redis.set(key, value, ex=ttl_seconds)
        except _STORE_ERRORS as exc:
            raise CacheError("SET", key, str(exc)) from exc

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        try:
            return await self._redis.delete(*keys)
        except _STORE_ERRORS as exc:
            raise CacheError("DEL", ",".join(keys), str(exc)) from exc

    async def lpush(self, key: str, value: str) -> int:
        try:
            return await self._redis.lpush(key, value)
        except _STORE_ERRORS as exc:
            raise CacheError("LPUSH", key, str(exc)) from exc

    async def ltrim(self, key: str, start: int, stop: int) -> None:
        try:
            await self._redis.ltrim(key, start, stop)
        except _STORE_ERRORS as exc:
            raise CacheError("LTRIM", key, str(exc)) from exc

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        try:
            return await self._redis.lrange(key, start, stop)
        except _STORE_ERRORS as exc:
            raise CacheError("LRANGE", key, str(exc)) from exc

    async def close(self) -> None:
        await self._redis.aclose()
