"""
gridstate Kernel — Selectors

Read-only views over grid state: which columns show, and which rows land
on the current page after filtering and sorting. Nothing here changes
state.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from gridstate.config import settings
from gridstate.kernel.merge import get_in
from gridstate.kernel.reducer import is_column_visible


def visible_columns(state: Mapping[str, Any]) -> list[str]:
    """Ids of visible columns, ordered by `order` then by insertion."""
    columns = get_in(state, ["renderProperties", "columnProperties"]) or {}
    ordered = sorted(
        enumerate(columns.items()),
        key=lambda item: (_order_of(item[1][1]), item[0]),
    )
    return [column_id for _, (column_id, _props) in ordered if is_column_visible(state, column_id)]


def _order_of(props: Any) -> float:
    if isinstance(props, Mapping):
        order = props.get("order")
        if isinstance(order, int | float) and not isinstance(order, bool):
            return order
    return math.inf


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def _matches(value: Any, needle: str) -> bool:
    if value is None:
        return False
    return needle in str(value).lower()


def filtered_data(state: Mapping[str, Any]) -> list[dict[str, Any]]:
    """
    Rows that pass the current filter.

    A string filter matches any cell (case-insensitive substring). A mapping
    filter {column: text} requires every listed column to match. An empty
    filter keeps every row.
    """
    rows = state.get("data") or []
    filt = state.get("filter")

    if not filt:
        return list(rows)

    if isinstance(filt, Mapping):
        wanted = {col: str(text).lower() for col, text in filt.items() if text not in (None, "")}
        return [row for row in rows if all(_matches(row.get(col), text) for col, text in wanted.items())]

    needle = str(filt).lower()
    return [
        row
        for row in rows
        if any(_matches(value, needle) for key, value in row.items() if key != settings.ROW_KEY_FIELD)
    ]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def _sort_value(value: Any) -> tuple[int, Any]:
    """Rank values so mixed types still compare: numbers, strings, others."""
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, int | float):
        return (0, value)
    if isinstance(value, str):
        return (1, value.lower())
    return (2, str(value))


def sorted_data(state: Mapping[str, Any], rows: list[dict[str, Any]] | None = None) -> list[dict[str, Any]]:
    """
    Stable multi-column sort. The first sortProperties entry is the primary
    key. Missing or None cells sort last regardless of direction.
    """
    result = list(state.get("data") or []) if rows is None else list(rows)

    # Apply keys from least to most significant; sorted() is stable
    for sort in reversed(state.get("sortProperties") or []):
        column_id = sort.get("id")
        ascending = sort.get("sortAscending", True) is not False
        present = [row for row in result if row.get(column_id) is not None]
        missing = [row for row in result if row.get(column_id) is None]
        present.sort(key=lambda row: _sort_value(row[column_id]), reverse=not ascending)
        result = present + missing

    return result


# ---------------------------------------------------------------------------
# Paging
# ---------------------------------------------------------------------------


def _page_size(state: Mapping[str, Any]) -> int:
    size = get_in(state, ["pageProperties", "pageSize"])
    if not isinstance(size, int) or size < 1:
        return settings.DEFAULT_PAGE_SIZE
    return size


def max_page(state: Mapping[str, Any]) -> int:
    """Number of pages needed for the filtered rows."""
    return math.ceil(len(filtered_data(state)) / _page_size(state))


def current_page_data(state: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Filter, sort, then slice out the current page."""
    rows = sorted_data(state, filtered_data(state))
    page = get_in(state, ["pageProperties", "currentPage"])
    if not isinstance(page, int) or page < 1:
        page = settings.DEFAULT_CURRENT_PAGE

    size = _page_size(state)
    start = (page - 1) * size
    return rows[start : start + size]
