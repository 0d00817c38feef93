"""
Id extraction from platform responses whose shape is not guaranteed.
"""

from typing import Any, Optional

ID_KEYS = ("ID", "id")

# Deep enough for every payload seen so far; keeps the scan bounded
MAX_SCAN_DEPTH = 8


def as_id(value: Any) -> Optional[str]:
    """Return value as an id string if it can be one, else None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def nested_id(body: Any, *path: str) -> Optional[str]:
    """Follow path through nested dicts and return the id found at its end"""
    current = body
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return as_id(current)


def find_id(value: Any, max_depth: int = MAX_SCAN_DEPTH) -> Optional[str]:
    """
    Best-effort search for any field named ID or id.

    Keys of the current object are checked before descending into its
    children; objects nested deeper than max_depth are not visited.
    """
    if max_depth < 0:
        return None

    if isinstance(value, dict):
        for key in ID_KEYS:
            found = as_id(value.get(key))
            if found is not None:
                return found
        children = list(value.values())
    elif isinstance(value, list):
        children = value
    else:
        return None

    for child in children:
        found = find_id(child, max_depth - 1)
        if found is not None:
            return found
    return None
