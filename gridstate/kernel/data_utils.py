"""
gridstate Kernel — Data utilities

Column-property derivation, row transformation and data reconciliation
used by the reducer. Pure functions; inputs are never modified.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from gridstate.config import settings
from gridstate.kernel.merge import get_in
from gridstate.kernel.types import TransformedData

logger = logging.getLogger(__name__)


def add_column_properties_when_none_exist(config: Mapping[str, Any]) -> dict[str, Any]:
    """
    Derive column properties from the first row when the config has data
    but no column properties of its own.

    Each key of the first row becomes {"id": key, "order": i}.
    """
    result = dict(config)
    data = config.get("data")
    if not data:
        return result

    existing = get_in(config, ["renderProperties", "columnProperties"])
    if existing:
        return result

    first_row = data[0]
    if not isinstance(first_row, Mapping):
        return result

    column_properties = {key: {"id": key, "order": i} for i, key in enumerate(first_row)}
    render_properties = copy.deepcopy(dict(config.get("renderProperties") or {}))
    render_properties["columnProperties"] = column_properties
    result["renderProperties"] = render_properties
    return result


def _row_key(render_properties: Mapping[str, Any] | None) -> str | None:
    return get_in(render_properties, ["rowProperties", "rowKey"])


def _keys_are_unique(data: Sequence[Mapping[str, Any]], row_key: str) -> bool:
    seen: list[Any] = []
    for row in data:
        if row.get(row_key) is None:
            return False
        value = row[row_key]
        if value in seen:
            return False
        seen.append(value)
    return True


def transform_data(
    data: Sequence[Mapping[str, Any]] | None,
    render_properties: Mapping[str, Any] | None,
) -> TransformedData:
    """
    Copy each row and tag it with its row id.

    The row id is the row's value for `renderProperties.rowProperties.rowKey`
    when that is configured, otherwise the row's index. If any row lacks a
    key value, or two rows share one, every row uses its index so that
    `lookup` (row id → position) stays one entry per row.
    """
    data = list(data or [])
    row_key = _row_key(render_properties)
    if row_key and not _keys_are_unique(data, row_key):
        logger.debug("transform_data: row key %s missing or repeated, using row index", row_key)
        row_key = None

    rows: list[dict[str, Any]] = []
    lookup: dict[Any, int] = {}

    for index, row in enumerate(data):
        row_id = row[row_key] if row_key else index
        tagged = copy.deepcopy(dict(row))
        tagged[settings.ROW_KEY_FIELD] = row_id
        rows.append(tagged)
        lookup[row_id] = index

    logger.debug("transform_data: %d rows (row key: %s)", len(rows), row_key or "index")
    return TransformedData(data=rows, lookup=lookup)


def update_data_from_props(
    state: Mapping[str, Any],
    new_props: Mapping[str, Any],
    old_props: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Re-transform `data` when the host passed new data.
    Returns the state unchanged (as a new dict) otherwise.
    """
    result = dict(state)
    if "data" not in new_props:
        return result

    new_data = new_props["data"]
    old_data = (old_props or {}).get("data")
    if new_data is old_data or new_data == old_data:
        return result

    transformed = transform_data(new_data, state.get("renderProperties"))
    result["data"] = transformed.data
    result["lookup"] = transformed.lookup
    return result
