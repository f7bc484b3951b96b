"""In-memory SQLite catalog used by the integration tests."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_admin.infrastructure.database import (
    Base,
    PriceTierModel,
    ProductModel,
    ProductSpecificationModel,
    build_session_factory,
)


async def create_catalog() -> tuple[AsyncEngine, async_sessionmaker]:
    """Fresh in-memory database with the catalog tables and product p1.

    p1 starts with one price tier ``t1`` and one specification ``s1``.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        session.add(ProductModel(id="p1", name="Hoodie", slug="hoodie", base_price=25.0))
        session.add(ProductModel(id="p2", name="Cap", slug="cap", base_price=12.0, is_active=False))
        await session.flush()
        session.add(
            PriceTierModel(
                id="t1", product_id="p1", min_quantity=1, price_per_unit=10.0, display_order=0
            )
        )
        session.add(
            ProductSpecificationModel(
                id="s1",
                product_id="p1",
                spec_key="material",
                spec_label="Material",
                spec_value="Cotton",
                display_order=0,
            )
        )
        await session.commit()
    return engine, session_factory


async def tiers_of(session_factory: async_sessionmaker, product_id: str) -> list[PriceTierModel]:
    async with session_factory() as session:
        result = await session.execute(
            select(PriceTierModel)
            .where(PriceTierModel.product_id == product_id)
            .order_by(PriceTierModel.display_order)
        )
        return list(result.scalars().all())


async def product(session_factory: async_sessionmaker, product_id: str) -> ProductModel | None:
    async with session_factory() as session:
        return await session.get(ProductModel, product_id)
