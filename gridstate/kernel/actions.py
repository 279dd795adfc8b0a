"""
gridstate Kernel — Actions

The action record dispatched to the reducer, and one factory per action
kind. Payloads are carried as-is; the reducer tolerates missing keys.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gridstate.kernel.types import (
    LOADED_DATA,
    SET_FILTER,
    SET_PAGE,
    SET_PAGE_SIZE,
    SET_SORT,
    TOGGLE_COLUMN,
    TOGGLE_SETTINGS,
    UPDATE_STATE,
)


class Action(BaseModel):
    """A user or data event. The reducer reads only `type` and `payload`."""

    model_config = ConfigDict(frozen=True)

    type: str
    payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Action:
        """
        Build an action from a flat record such as
        {"type": "grid.set_page", "pageNumber": 3}.
        Every key other than `type` lands in the payload.
        """
        payload = {k: v for k, v in record.items() if k != "type"}
        return cls(type=record["type"], payload=payload)


def loaded_data(data: Sequence[Mapping[str, Any]]) -> Action:
    return Action(type=LOADED_DATA, payload={"data": list(data)})


def set_page_size(page_size: int) -> Action:
    return Action(type=SET_PAGE_SIZE, payload={"pageSize": page_size})


def set_page(page_number: int) -> Action:
    return Action(type=SET_PAGE, payload={"pageNumber": page_number})


def set_filter(filter: Any) -> Action:
    return Action(type=SET_FILTER, payload={"filter": filter})


def set_sort(sort_properties: Mapping[str, Any] | Sequence[Mapping[str, Any]]) -> Action:
    """Accepts one {id, sortAscending} record or a list of them."""
    return Action(type=SET_SORT, payload={"sortProperties": sort_properties})


def toggle_settings() -> Action:
    return Action(type=TOGGLE_SETTINGS)


def toggle_column(column_id: str) -> Action:
    return Action(type=TOGGLE_COLUMN, payload={"columnId": column_id})


def update_state(new_props: Mapping[str, Any], old_props: Mapping[str, Any] | None = None) -> Action:
    """Host props changed; `old_props` are the props from the previous render."""
    return Action(
        type=UPDATE_STATE,
        payload={"update": {"newProps": dict(new_props), "oldProps": dict(old_props or {})}},
    )
