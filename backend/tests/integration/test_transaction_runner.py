"""Integration tests: transactional child-row replacement against SQLite."""

import asyncio

import pytest

from catalog_admin.application.services import CollectionReplacer
from catalog_admin.domain.entities import PriceTier, ProductPricing
from catalog_admin.domain.exceptions import EntityNotFoundError, TransactionError
from catalog_admin.infrastructure.database.transaction import SQLAlchemyTransactionRunner
from tests.integration.sqlite_catalog import create_catalog, product, tiers_of


def _tier(id: str | None, min_quantity: int, price: float, order: int) -> PriceTier:
    return PriceTier(id=id, min_quantity=min_quantity, price_per_unit=price, display_order=order)


@pytest.mark.asyncio
async def test_replace_scenario_generates_new_rows_in_order():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            return await CollectionReplacer(uow.price_tiers).replace_children(
                "p1", [_tier("new", 1, 10.0, 0), _tier("new", 10, 8.0, 1)]
            )

        written = await runner.run_in_transaction(work)

        rows = await tiers_of(session_factory, "p1")
        assert len(rows) == 2
        assert "t1" not in {r.id for r in rows}
        assert len({r.id for r in rows}) == 2
        assert [(r.min_quantity, r.price_per_unit, r.display_order) for r in rows] == [
            (1, 10.0, 0),
            (10, 8.0, 1),
        ]
        assert [w.id for w in written] == [r.id for r in rows]
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_failed_insert_rolls_back_delete_and_pricing():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            await uow.products.update_pricing(ProductPricing(product_id="p1", base_price=99.0))
            # Same explicit id twice: the second insert violates the primary key.
            return await CollectionReplacer(uow.price_tiers).replace_children(
                "p1", [_tier("dup", 1, 10.0, 0), _tier("dup", 10, 8.0, 1)]
            )

        with pytest.raises(TransactionError):
            await runner.run_in_transaction(work)

        rows = await tiers_of(session_factory, "p1")
        assert [(r.id, r.min_quantity, r.price_per_unit) for r in rows] == [("t1", 1, 10.0)]
        assert (await product(session_factory, "p1")).base_price == 25.0
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_empty_replace_clears_all_rows():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            return await CollectionReplacer(uow.price_tiers).replace_children("p1", [])

        await runner.run_in_transaction(work)

        assert await tiers_of(session_factory, "p1") == []
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_resubmitted_id_survives_replace():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            return await CollectionReplacer(uow.price_tiers).replace_children(
                "p1", [_tier("t1", 5, 9.0, 3), _tier(None, 50, 7.0, 3)]
            )

        await runner.run_in_transaction(work)

        rows = await tiers_of(session_factory, "p1")
        assert len(rows) == 2
        t1 = next(r for r in rows if r.id == "t1")
        assert (t1.min_quantity, t1.price_per_unit, t1.display_order) == (5, 9.0, 3)
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_domain_abort_propagates_unchanged_and_rolls_back():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            await uow.price_tiers.delete_for_parent("p1")
            raise EntityNotFoundError("Product", "p1")

        with pytest.raises(EntityNotFoundError):
            await runner.run_in_transaction(work)

        assert [r.id for r in await tiers_of(session_factory, "p1")] == ["t1"]
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_cancellation_rolls_back():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            await uow.price_tiers.delete_for_parent("p1")
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await runner.run_in_transaction(work)

        assert [r.id for r in await tiers_of(session_factory, "p1")] == ["t1"]
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_update_pricing_reports_missing_product():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            return await uow.products.update_pricing(ProductPricing(product_id="ghost", base_price=1.0))

        assert await runner.run_in_transaction(work) is False
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_analytics_counts():
    engine, session_factory = await create_catalog()
    runner = SQLAlchemyTransactionRunner(session_factory)
    try:
        async def work(uow):
            return await uow.products.get_analytics()

        analytics = await runner.run_in_transaction(work)

        assert analytics.total_products == 2
        assert analytics.active_products == 1
        assert analytics.total_price_tiers == 1
        assert analytics.total_specifications == 1
    finally:
        await engine.dispose()
