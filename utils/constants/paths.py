"""Filesystem paths for logs."""

import sys
from pathlib import Path


def _default_base_dir() -> Path:
    """Return the writable base directory for logging."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent.parent.parent


BASE_DATA_DIR = _default_base_dir()
LOGS_DIR = BASE_DATA_DIR / "logs"
LOG_FILE = LOGS_DIR / "draw_calc.log"


def ensure_base_dirs() -> None:
    """Ensure the log directory exists without importing side effects."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
