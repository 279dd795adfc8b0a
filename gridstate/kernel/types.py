"""
gridstate Kernel — Shared Types

Action type registry and the property lists that decide how host props
are folded into grid state.

State shape (plain nested dict, never mutated in place):

    data               list of row dicts, each tagged with griddleKey
    lookup             {row_id: position}
    loading            bool
    renderProperties   {columnProperties: {id: {...}}, layoutProperties: {...}}
    pageProperties     {currentPage: int, pageSize: int}
    sortProperties     [{id, sortAscending}]
    filter             str | dict
    showSettings       bool
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

GridState = dict[str, Any]

# ---------------------------------------------------------------------------
# Action type registry
# ---------------------------------------------------------------------------

LOADED_DATA = "grid.loaded_data"
SET_PAGE_SIZE = "grid.set_page_size"
SET_PAGE = "grid.set_page"
SET_FILTER = "grid.set_filter"
SET_SORT = "grid.set_sort"
TOGGLE_SETTINGS = "grid.toggle_settings"
TOGGLE_COLUMN = "grid.toggle_column"
UPDATE_STATE = "grid.update_state"

ACTION_TYPES: set[str] = {
    LOADED_DATA,
    SET_PAGE_SIZE,
    SET_PAGE,
    SET_FILTER,
    SET_SORT,
    TOGGLE_SETTINGS,
    TOGGLE_COLUMN,
    UPDATE_STATE,
}

# ---------------------------------------------------------------------------
# Host property lists (UpdateState)
# ---------------------------------------------------------------------------

# Props the host may change after initialization
UPDATABLE_PROPERTIES: tuple[str, ...] = ("pageProperties", "sortProperties")

# Props consumed elsewhere; never copied into layoutProperties
STATIC_PROPERTIES: tuple[str, ...] = (
    "plugins",
    "children",
    "events",
    "styleConfig",
    "components",
    "renderProperties",
    "settingsComponentObjects",
)

HANDLED_PROPERTIES: frozenset[str] = frozenset(UPDATABLE_PROPERTIES + STATIC_PROPERTIES)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransformedData:
    """Rows tagged with their row id, plus the id → position index."""

    data: list[dict[str, Any]]
    lookup: dict[Any, int]
