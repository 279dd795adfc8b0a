"""gridstate - pure state reduction for tabular data grids."""

from gridstate.kernel import (
    Action,
    initialize,
    is_column_visible,
    reduce,
    replay,
)

__all__ = [
    "Action",
    "initialize",
    "is_column_visible",
    "reduce",
    "replay",
]
