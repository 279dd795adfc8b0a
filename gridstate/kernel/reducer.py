"""
gridstate Kernel — Reducer

Pure function: (state, action) → state
No side effects. No IO. Deterministic.

The input state is never modified; every handler returns a new dict.
Malformed payloads fall back to defaults instead of raising.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from gridstate.config import settings
from gridstate.kernel.actions import Action
from gridstate.kernel.data_utils import (
    add_column_properties_when_none_exist,
    transform_data,
    update_data_from_props,
)
from gridstate.kernel.merge import get_in, merge_deep, set_in
from gridstate.kernel.types import (
    HANDLED_PROPERTIES,
    LOADED_DATA,
    SET_FILTER,
    SET_PAGE,
    SET_PAGE_SIZE,
    SET_SORT,
    TOGGLE_COLUMN,
    TOGGLE_SETTINGS,
    UPDATABLE_PROPERTIES,
    UPDATE_STATE,
    GridState,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def initialize(config: Mapping[str, Any]) -> GridState:
    """
    Build the first state from a plain configuration mapping.

    Column properties are derived from the first data row when the config
    supplies none. Initial data is tagged and indexed. Missing paging and
    sort settings get defaults; supplied values are kept.
    """
    state = add_column_properties_when_none_exist(copy.deepcopy(dict(config)))

    data = config.get("data")
    if data:
        transformed = transform_data(data, state.get("renderProperties"))
        state["data"] = transformed.data
        state["lookup"] = transformed.lookup

    defaults: GridState = {
        "pageProperties": {
            "currentPage": settings.DEFAULT_CURRENT_PAGE,
            "pageSize": settings.DEFAULT_PAGE_SIZE,
        },
        "sortProperties": [],
        "renderProperties": {"columnProperties": {}},
    }
    return merge_deep(defaults, state)


def reduce(state: GridState, action: Action) -> GridState:
    """
    Apply one action to the current state and return the next state.
    Unknown action types leave the state unchanged.
    """
    handler = _HANDLERS.get(action.type)
    if handler is None:
        logger.warning("reducer: ignoring unknown action type %s", action.type)
        return state

    logger.debug("reducer: %s", action.type)
    return handler(state, action)


def replay(config: Mapping[str, Any], actions: Iterable[Action]) -> GridState:
    """
    Rebuild state from scratch.
    replay(config, [a1, a2]) == reduce(reduce(initialize(config), a1), a2)
    """
    state = initialize(config)
    for action in actions:
        state = reduce(state, action)
    return state


def is_column_visible(state: Mapping[str, Any], column_id: str) -> bool:
    """
    A column with a `visible` key uses its truthiness (so None is hidden).
    Without the key, the column is visible only if it has a render-property
    entry at all.
    """
    column = get_in(state, ["renderProperties", "columnProperties", column_id])
    if column is None:
        return False

    if not isinstance(column, Mapping) or "visible" not in column:
        return True
    return bool(column["visible"])


# ---------------------------------------------------------------------------
# Action handlers
# ---------------------------------------------------------------------------


def _handle_loaded_data(state: GridState, action: Action) -> GridState:
    render_properties = state.get("renderProperties") or {}
    transformed = transform_data(action.payload.get("data"), render_properties)

    snap = copy.deepcopy(state)
    snap["data"] = transformed.data
    snap["lookup"] = transformed.lookup
    snap["loading"] = False
    return snap


def _handle_set_page_size(state: GridState, action: Action) -> GridState:
    snap = set_in(state, ["pageProperties", "currentPage"], 1)
    return set_in(snap, ["pageProperties", "pageSize"], action.payload.get("pageSize"))


def _handle_set_page(state: GridState, action: Action) -> GridState:
    return set_in(state, ["pageProperties", "currentPage"], action.payload.get("pageNumber"))


def _handle_set_filter(state: GridState, action: Action) -> GridState:
    return set_in(state, ["filter"], action.payload.get("filter"))


def _handle_set_sort(state: GridState, action: Action) -> GridState:
    sort_properties = action.payload.get("sortProperties")

    # A single {id, sortAscending} record becomes a one-element list
    if sort_properties is None:
        sort_properties = []
    elif isinstance(sort_properties, Mapping):
        sort_properties = [sort_properties]
    else:
        sort_properties = list(sort_properties)

    return set_in(state, ["sortProperties"], sort_properties)


def _handle_toggle_settings(state: GridState, action: Action) -> GridState:
    show_settings = state.get("showSettings") or False
    return set_in(state, ["showSettings"], not show_settings)


def _handle_toggle_column(state: GridState, action: Action) -> GridState:
    column_id = action.payload.get("columnId")
    path = ["renderProperties", "columnProperties", column_id]

    if get_in(state, path) is not None:
        return set_in(state, [*path, "visible"], not is_column_visible(state, column_id))

    # No entry yet: create one that is visible
    return set_in(state, path, {"id": column_id, "visible": True})


def _is_set(value: Any) -> bool:
    """Falsy scalars are unset; empty lists and mappings still count."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int | float):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


def _handle_update_state(state: GridState, action: Action) -> GridState:
    update = action.payload.get("update") or {}
    new_props = update.get("newProps") or {}
    old_props = update.get("oldProps") or {}
    other_props = {k: v for k, v in new_props.items() if k != "data"}

    data_updated_state = update_data_from_props(state, new_props, old_props)

    property_updates: dict[str, Any] = {
        "renderProperties": {
            "layoutProperties": {k: v for k, v in other_props.items() if k not in HANDLED_PROPERTIES},
        },
    }
    for key in UPDATABLE_PROPERTIES:
        if _is_set(other_props.get(key)):
            property_updates[key] = other_props[key]

    # A new page size starts over at page 1 unless the host also chose a page
    page_properties = property_updates.get("pageProperties")
    if isinstance(page_properties, Mapping) and "currentPage" not in page_properties:
        current_size = get_in(state, ["pageProperties", "pageSize"])
        if "pageSize" in page_properties and page_properties["pageSize"] != current_size:
            property_updates["pageProperties"] = {**page_properties, "currentPage": 1}

    return merge_deep(data_updated_state, property_updates)


# ---------------------------------------------------------------------------
# Handler dispatch table
# ---------------------------------------------------------------------------

_HANDLERS: dict[str, Callable[[GridState, Action], GridState]] = {
    LOADED_DATA: _handle_loaded_data,
    SET_PAGE_SIZE: _handle_set_page_size,
    SET_PAGE: _handle_set_page,
    SET_FILTER: _handle_set_filter,
    SET_SORT: _handle_set_sort,
    TOGGLE_SETTINGS: _handle_toggle_settings,
    TOGGLE_COLUMN: _handle_toggle_column,
    UPDATE_STATE: _handle_update_state,
}
