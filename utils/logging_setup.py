"""Loguru sink configuration for the calculator application."""

from __future__ import annotations

import os
import sys

from loguru import logger

from utils.constants import LOG_FILE, ensure_base_dirs

LOG_LEVEL_ENV_VAR = "DRAW_CALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value: str | None = None) -> str:
    level = (value if value is not None else os.environ.get(LOG_LEVEL_ENV_VAR, "")).strip().upper()
    if not level:
        return DEFAULT_LOG_LEVEL
    try:
        logger.level(level)
    except ValueError:
        return DEFAULT_LOG_LEVEL
    return level


def configure_logging(level: str | None = None, *, log_to_file: bool = True) -> str:
    """Replace loguru's default sink with stderr plus an optional rotating file sink."""
    resolved = resolve_log_level(level)
    logger.remove()
    logger.add(sys.stderr, level=resolved)
    if log_to_file:
        ensure_base_dirs()
        logger.add(LOG_FILE, level=resolved, rotation="1 MB", retention=3, encoding="utf-8")
    logger.debug(f"Logging configured at {resolved}")
    return resolved


__all__ = ["configure_logging", "resolve_log_level"]
