from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Set, Tuple

from rich.logging import RichHandler

logger = logging.getLogger("fluid_tailwind")

_SHOWN: Set[Tuple[str, Tuple[str, ...]]] = set()


class LogLevel(Enum):
    WARN = "warn"
    # Warn, then raise FluidValueError.
    RISK = "risk"


def warn(category: str, *messages: str) -> None:
    """Log a categorized warning once per (category, messages) pair."""
    key = (category, messages)
    if key in _SHOWN:
        return
    _SHOWN.add(key)
    for message in messages:
        logger.warning("%s - %s", category, message, extra={"category": category})


def reset_warnings() -> None:
    _SHOWN.clear()


def setup_logging(level: str | None = None) -> None:
    """Configure console logging through RichHandler.

    Level resolution: the argument, then env `FLUID_TAILWIND_LOG_LEVEL`,
    then "INFO". Safe to call more than once.
    """
    if level is None:
        level = os.environ.get("FLUID_TAILWIND_LOG_LEVEL", "INFO")
    level = str(level).upper().strip()
    if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        level = "INFO"

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%H:%M:%S]",
        handlers=[RichHandler(show_path=False, show_time=False, rich_tracebacks=True)],
    )
