"""
gridstate configuration — all environment variables in one place.

Read from environment at import time.
"""

from __future__ import annotations

import os


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise RuntimeError(f"{name} must be positive, got {value}")
    return value


class Settings:
    """Grid defaults from environment variables."""

    # Paging
    DEFAULT_PAGE_SIZE: int = _positive_int("GRID_DEFAULT_PAGE_SIZE", 10)
    DEFAULT_CURRENT_PAGE: int = 1

    # Rows
    ROW_KEY_FIELD: str = os.environ.get("GRID_ROW_KEY_FIELD", "griddleKey")


# Singleton instance
settings = Settings()
