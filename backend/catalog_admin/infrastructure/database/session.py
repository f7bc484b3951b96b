"""SQLAlchemy async engine and session factory."""

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from catalog_admin.config import get_settings


def get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Session factory used by the transaction runner.

    ``expire_on_commit=False`` keeps ORM rows readable after the runner commits.
    """
    return async_sessionmaker(bind, expire_on_commit=False)


settings = get_settings()

engine = create_async_engine(
    get_async_url(settings.database_url),
    echo=False,
    pool_pre_ping=True,
)

async_session_factory = build_session_factory(engine)
