"""Centralized logging configuration.

Per-category log levels come from Settings, so SQL statements or redis
connection chatter can be silenced while update-stage tracing stays on.

Usage:
    from catalog_admin.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from catalog_admin.config import Settings, get_settings

_DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field → logger names whose level it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": (
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ),
    "log_level_cache": (
        "redis",
        "catalog_admin.infrastructure.cache",
        "catalog_admin.application.services.admin_cache",
        "catalog_admin.application.services.activity_log",
    ),
    "log_level_uvicorn": (
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ),
    "log_level_updates": (
        "ProductUpdateService",
        "catalog_admin.application.services.product_update_service",
        "catalog_admin.infrastructure.database.transaction",
    ),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels. Safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    _ensure_handler(root)

    applied: dict[str, str] = {}
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(raw_level))
        applied[settings_field] = raw_level

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s %s",
        settings.log_level,
        " ".join(f"{k.removeprefix('log_level_')}={v}" for k, v in applied.items()),
    )


def _ensure_handler(root: logging.Logger) -> None:
    """Attach a stderr handler when nobody else (uvicorn, pytest) has."""
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    root.addHandler(handler)


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
