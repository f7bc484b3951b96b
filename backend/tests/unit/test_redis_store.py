"""Unit tests for the RedisKeyValueStore adapter's error translation."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from catalog_admin.application.services import ActivityLog, AdminCache
from catalog_admin.domain.exceptions import CacheError
from catalog_admin.infrastructure.cache import RedisKeyValueStore


def _client(**methods) -> AsyncMock:
    client = AsyncMock()
    for name, value in methods.items():
        setattr(client, name, value)
    return client


@pytest.mark.asyncio
async def test_set_passes_ttl_as_expiry():
    client = _client()
    store = RedisKeyValueStore(client)

    await store.set("admin:analytics", "{}", ttl_seconds=300)

    client.set.assert_awaited_once_with("admin:analytics", "{}", ex=300)


@pytest.mark.asyncio
async def test_list_commands_are_forwarded():
    client = _client(lrange=AsyncMock(return_value=["b", "a"]))
    store = RedisKeyValueStore(client)

    await store.lpush("admin:activity:u1", "a")
    await store.ltrim("admin:activity:u1", 0, 99)
    items = await store.lrange("admin:activity:u1", 0, 19)

    client.lpush.assert_awaited_once_with("admin:activity:u1", "a")
    client.ltrim.assert_awaited_once_with("admin:activity:u1", 0, 99)
    assert items == ["b", "a"]


@pytest.mark.asyncio
async def test_connection_errors_become_cache_errors():
    client = _client(get=AsyncMock(side_effect=RedisConnectionError("Connection refused")))
    store = RedisKeyValueStore(client)

    with pytest.raises(CacheError) as excinfo:
        await store.get("admin:users")

    assert excinfo.value.operation == "GET"
    assert excinfo.value.key == "admin:users"
    assert "Connection refused" in excinfo.value.reason


@pytest.mark.asyncio
async def test_delete_without_keys_is_a_no_op():
    client = _client()
    store = RedisKeyValueStore(client)

    assert await store.delete() == 0
    client.delete.assert_not_awaited()


def _undecodable() -> UnicodeDecodeError:
    return UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")


@pytest.mark.asyncio
async def test_undecodable_value_becomes_cache_error():
    store = RedisKeyValueStore(_client(get=AsyncMock(side_effect=_undecodable())))

    with pytest.raises(CacheError) as excinfo:
        await store.get("admin:analytics")

    assert excinfo.value.operation == "GET"


@pytest.mark.asyncio
async def test_undecodable_list_element_becomes_cache_error():
    store = RedisKeyValueStore(_client(lrange=AsyncMock(side_effect=_undecodable())))

    with pytest.raises(CacheError) as excinfo:
        await store.lrange("admin:activity:u1", 0, 19)

    assert excinfo.value.operation == "LRANGE"


@pytest.mark.asyncio
async def test_cache_and_activity_log_stay_fail_open_on_undecodable_data():
    client = _client(
        get=AsyncMock(side_effect=_undecodable()),
        lrange=AsyncMock(side_effect=_undecodable()),
    )
    store = RedisKeyValueStore(client)

    assert await AdminCache(store).get_cached_analytics() is None
    assert await ActivityLog(store).recent("u1") == []
