from .memory_store import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "RedisKeyValueStore",
]
