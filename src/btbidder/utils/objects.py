"""Helpers for nested OpenRTB dictionaries."""

import copy
from typing import Any


def deep_access(obj: Any, path: str, default: Any = None) -> Any:
    """
    Read a dotted path from nested dicts.

    Missing or non-dict intermediate values yield the default.
    """
    current = obj
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def deep_set_value(obj: dict[str, Any], path: str, value: Any) -> None:
    """Set a dotted path on nested dicts, creating intermediate dicts."""
    keys = path.split(".")
    current = obj
    for key in keys[:-1]:
        child = current.get(key)
        if not isinstance(child, dict):
            child = {}
            current[key] = child
        current = child
    current[keys[-1]] = value


def merge_deep(parent: dict[str, Any], child: dict[str, Any]) -> dict[str, Any]:
    """
    Merge child into a copy of parent.

    Dicts merge recursively; any other child value replaces the parent's.
    Neither input is modified.
    """
    result = copy.deepcopy(parent)
    for key, child_value in child.items():
        parent_value = result.get(key)
        if isinstance(child_value, dict) and isinstance(parent_value, dict):
            result[key] = merge_deep(parent_value, child_value)
        else:
            result[key] = copy.deepcopy(child_value)
    return result
