"""Unit tests for the CollectionReplacer."""

import pytest

from catalog_admin.application.services import CollectionReplacer
from catalog_admin.domain.entities import PriceTier, ProductSpecification
from tests.fakes import FakeChildRowRepository, FakeDatabaseState, InsertFailure


def _tier(id: str | None, min_quantity: int, price: float, order: int, parent: str | None = None):
    return PriceTier(
        id=id,
        product_id=parent,
        min_quantity=min_quantity,
        price_per_unit=price,
        display_order=order,
    )


@pytest.fixture
def state() -> FakeDatabaseState:
    return FakeDatabaseState(
        price_tiers=[
            _tier("t1", 1, 10.0, 0, parent="p1"),
            _tier("other", 5, 7.0, 0, parent="p2"),
        ]
    )


@pytest.mark.asyncio
async def test_replace_with_new_rows_generates_fresh_ids(state: FakeDatabaseState):
    """The p1 scenario: t1 disappears, two new distinct ids appear in order."""
    repo = FakeChildRowRepository(state, "price_tiers")
    replacer = CollectionReplacer(repo)

    written = await replacer.replace_children(
        "p1", [_tier("new", 1, 10.0, 0), _tier("new", 10, 8.0, 1)]
    )

    rows = await repo.list_for_parent("p1")
    assert len(rows) == 2
    assert "t1" not in {r.id for r in rows}
    assert rows[0].id != rows[1].id
    assert all(r.id != "new" for r in rows)
    assert [(r.min_quantity, r.price_per_unit, r.display_order) for r in rows] == [
        (1, 10.0, 0),
        (10, 8.0, 1),
    ]
    assert [r.id for r in written] == [r.id for r in rows]


@pytest.mark.asyncio
async def test_replace_preserves_explicit_ids(state: FakeDatabaseState):
    repo = FakeChildRowRepository(state, "price_tiers")

    await CollectionReplacer(repo).replace_children(
        "p1", [_tier("t1", 2, 9.5, 0), _tier(None, 20, 7.0, 1), _tier("", 50, 6.0, 2)]
    )

    ids = [r.id for r in await repo.list_for_parent("p1")]
    assert ids[0] == "t1"
    assert ids[1] and ids[2] and ids[1] != ids[2]
    assert "" not in ids


@pytest.mark.asyncio
async def test_replace_with_empty_list_clears_children(state: FakeDatabaseState):
    repo = FakeChildRowRepository(state, "price_tiers")

    written = await CollectionReplacer(repo).replace_children("p1", [])

    assert written == []
    assert await repo.list_for_parent("p1") == []
    # Other parents untouched
    assert [r.id for r in await repo.list_for_parent("p2")] == ["other"]


@pytest.mark.asyncio
async def test_duplicate_display_orders_are_stored_verbatim(state: FakeDatabaseState):
    repo = FakeChildRowRepository(state, "price_tiers")

    written = await CollectionReplacer(repo).replace_children(
        "p1", [_tier("a", 1, 3.0, 5), _tier("b", 2, 2.0, 5), _tier("c", 3, 1.0, -1)]
    )

    assert [(r.id, r.display_order) for r in written] == [("a", 5), ("b", 5), ("c", -1)]


@pytest.mark.asyncio
async def test_rows_are_bound_to_the_parent(state: FakeDatabaseState):
    repo = FakeChildRowRepository(state, "price_tiers")

    written = await CollectionReplacer(repo).replace_children(
        "p1", [_tier("x", 1, 1.0, 0, parent="somebody-else")]
    )

    assert written[0].product_id == "p1"


@pytest.mark.asyncio
async def test_specification_ids_use_repository_prefix():
    state = FakeDatabaseState()
    repo = FakeChildRowRepository(state, "specifications", id_prefix="spec")

    written = await CollectionReplacer(repo).replace_children(
        "p1",
        [ProductSpecification(id="new", spec_key="material", spec_label="Material", spec_value="Cotton")],
    )

    assert written[0].id.startswith("spec-")


@pytest.mark.asyncio
async def test_insert_failure_propagates(state: FakeDatabaseState):
    repo = FakeChildRowRepository(state, "price_tiers", fail_on_insert=2)

    with pytest.raises(InsertFailure):
        await CollectionReplacer(repo).replace_children(
            "p1", [_tier("new", 1, 10.0, 0), _tier("new", 10, 8.0, 1)]
        )
