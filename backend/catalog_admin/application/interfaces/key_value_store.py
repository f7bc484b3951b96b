"""Abstract key/value store interface (port) shared by the cache and activity log."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for the shared key/value backend (Redis in production).

    Every operation is atomic per key. Implementations raise ``CacheError``
    when the backend is unreachable or rejects the command.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored string, or None if absent or expired."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """Store a string, expiring after ``ttl_seconds`` when given."""
        ...

    @abstractmethod
    async def delete(self, *keys: str) -> int:
        """Delete keys. Returns how many existed."""
        ...

    @abstractmethod
    async def lpush(self, key: str, value: str) -> int:
        """Prepend to the list at ``key``. Returns the new length."""
        ...

    @abstractmethod
    async def ltrim(self, key: str, start: int, stop: int) -> None:
        """Keep only list elements ``start..stop`` (inclusive, Redis semantics)."""
        ...

    @abstractmethod
    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        """Return list elements ``start..stop`` (inclusive, Redis semantics)."""
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        return None
