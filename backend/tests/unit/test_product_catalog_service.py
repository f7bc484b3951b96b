"""Unit tests for the ProductCatalogService (read side)."""

import pytest

from catalog_admin.application.services import AdminCache, ProductCatalogService
from catalog_admin.domain.entities import PriceTier
from catalog_admin.domain.exceptions import EntityNotFoundError
from catalog_admin.infrastructure.cache import InMemoryKeyValueStore
from tests.fakes import FakeDatabaseState, FakeTransactionRunner, make_product


@pytest.fixture
def runner() -> FakeTransactionRunner:
    return FakeTransactionRunner(
        FakeDatabaseState(
            products={"p1": make_product("p1"), "p2": make_product("p2")},
            price_tiers=[
                PriceTier(id="b", product_id="p1", min_quantity=10, price_per_unit=8.0, display_order=1),
                PriceTier(id="a", product_id="p1", min_quantity=1, price_per_unit=10.0, display_order=0),
            ],
        )
    )


@pytest.fixture
def cache() -> AdminCache:
    return AdminCache(InMemoryKeyValueStore())


@pytest.mark.asyncio
async def test_get_pricing_orders_tiers(runner, cache):
    view = await ProductCatalogService(runner, cache).get_pricing("p1")

    assert view.pricing.product_id == "p1"
    assert [t.id for t in view.tiers] == ["a", "b"]


@pytest.mark.asyncio
async def test_get_pricing_unknown_product(runner, cache):
    with pytest.raises(EntityNotFoundError):
        await ProductCatalogService(runner, cache).get_pricing("nope")


@pytest.mark.asyncio
async def test_analytics_are_served_from_cache_until_invalidated(runner, cache):
    service = ProductCatalogService(runner, cache)

    first = await service.get_analytics()
    assert first.total_products == 2
    assert first.total_price_tiers == 2

    runner.state.price_tiers.clear()
    assert (await service.get_analytics()).total_price_tiers == 2

    await cache.invalidate()
    assert (await service.get_analytics()).total_price_tiers == 0
