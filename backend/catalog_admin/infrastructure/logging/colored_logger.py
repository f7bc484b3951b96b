"""Colored update logger — ANSI-colored console tracing of admin write requests.

Each product update moves through a fixed set of stages; this logger gives
every stage its own color so a request can be followed in the terminal.

Color scheme:
    🟡 Yellow  — Validating
    🔵 Blue    — In transaction / committed
    🟣 Magenta — Cache invalidation
    🟠 Cyan    — Activity log
    🔴 Red     — Rejected / rolled back
    🟢 Green   — Succeeded
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Update Stage Definitions ─────────────────────────────────────────

class UpdateStage:
    """Stages of the update state machine, with colors and icons."""

    VALIDATING = ("VALIDATING", _Colors.YELLOW, "🔎")
    IN_TRANSACTION = ("IN_TRANSACTION", _Colors.BLUE, "🔒")
    COMMITTED = ("COMMITTED", _Colors.BLUE, "💾")
    CACHE_INVALIDATED = ("CACHE", _Colors.MAGENTA, "🧹")
    LOGGED = ("ACTIVITY", _Colors.CYAN, "📝")
    REJECTED = ("REJECTED", _Colors.RED, "⛔")
    ROLLED_BACK = ("ROLLED_BACK", _Colors.RED, "↩️")
    SUCCEEDED = ("SUCCEEDED", _Colors.GREEN, "✅")


def _format_kwargs(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())


# ── UpdateLogger ─────────────────────────────────────────────────────

class UpdateLogger:
    """Color-coded logger for the product update pipeline.

    Usage:
        ulog = UpdateLogger("ProductUpdateService")
        ulog.stage(UpdateStage.VALIDATING, "pricing for p1", tiers=2)
        with ulog.timed_step(UpdateStage.IN_TRANSACTION, "replace tiers"):
            ...
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def stage(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log entry into a stage."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_kwargs(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def failure(
        self, stage: tuple[str, str, str], message: str, error: BaseException | None = None
    ) -> None:
        """Log a terminal failure stage in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error is not None:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs stage entry and elapsed time.

        Failures are logged as ROLLED_BACK and re-raised.
        """
        self.stage(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except BaseException as e:
            elapsed = time.perf_counter() - start
            self.failure(UpdateStage.ROLLED_BACK, f"{message} — after {elapsed:.3f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.stage(UpdateStage.COMMITTED, f"{message} — {elapsed:.3f}s")
