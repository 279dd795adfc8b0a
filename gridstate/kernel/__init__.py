"""
gridstate Kernel — the pure engine.

Components:
  actions     — action record + factories
  reducer     — (state, action) → state  (pure, deterministic)
  data_utils  — column derivation, row tagging, data reconciliation
  merge       — nested get/set and deep merge over plain dicts

Query helpers (from selectors):
  visible_columns, filtered_data, sorted_data, max_page, current_page_data
"""

from gridstate.kernel.actions import Action
from gridstate.kernel.reducer import initialize, is_column_visible, reduce, replay
from gridstate.kernel.selectors import (
    current_page_data,
    filtered_data,
    max_page,
    sorted_data,
    visible_columns,
)

__all__ = [
    "Action",
    "initialize",
    "reduce",
    "replay",
    "is_column_visible",
    "visible_columns",
    "filtered_data",
    "sorted_data",
    "max_page",
    "current_page_data",
]
