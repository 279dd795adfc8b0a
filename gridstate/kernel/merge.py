"""
gridstate Kernel — Nested mapping helpers

Path access and deep merge over plain dicts. Every writer returns a new
dict; the arguments are never modified.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any


def get_in(mapping: Mapping[str, Any] | None, path: Sequence[Any], default: Any = None) -> Any:
    """Walk `path` through nested mappings. Missing keys yield `default`."""
    current: Any = mapping
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def set_in(mapping: Mapping[str, Any], path: Sequence[Any], value: Any) -> dict[str, Any]:
    """
    Return a deep copy of `mapping` with `value` stored at `path`.
    Intermediate mappings are created when missing (or not mappings).
    """
    if not path:
        raise ValueError("set_in requires a non-empty path")

    result = copy.deepcopy(dict(mapping))
    node = result
    for key in path[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = dict(child) if isinstance(child, Mapping) else {}
            node[key] = child
        node = child
    node[path[-1]] = copy.deepcopy(value)
    return result


def merge_deep(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge `patch` into `base` recursively.

    Mapping/mapping pairs merge key by key. Anything else in `patch`
    (scalars, lists) replaces the value in `base` wholesale.
    """
    result = copy.deepcopy(dict(base))
    for key, value in patch.items():
        existing = result.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            result[key] = merge_deep(existing, value)
        else:
            result[key] = copy.deepcopy(value)
    return result
