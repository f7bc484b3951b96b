"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_admin.config import get_settings
from catalog_admin.infrastructure.database import Base, engine
from catalog_admin.infrastructure.dependencies import get_key_value_store
from catalog_admin.infrastructure.logging.log_config import setup_logging
from catalog_admin.presentation.api.responses import register_exception_handlers
from catalog_admin.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, ensure tables, close the cache store."""
    settings = get_settings()
    setup_logging(settings)

    # Tables are owned by the storefront schema; create_all only fills gaps
    # in fresh development databases.
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception:
        logger.exception("Could not ensure catalog tables, continuing without them")

    logger.info(
        "%s %s started (env=%s)", settings.app_title, settings.app_version, settings.app_env
    )

    yield

    # Shutdown
    await get_key_value_store().close()
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_admin.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
