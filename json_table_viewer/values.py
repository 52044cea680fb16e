from __future__ import annotations

import json
from typing import Any


def is_nested(value: Any) -> bool:
    """True for object-like JSON values (dicts and arrays), never for None."""
    return isinstance(value, (dict, list))


def nested_items(value: Any):
    """Iterate (key, value) pairs of a nested value; arrays are keyed by index."""
    if isinstance(value, dict):
        return list(value.items())
    if isinstance(value, list):
        return [(str(i), v) for i, v in enumerate(value)]
    return []


def capitalize_label(key: Any) -> str:
    if not isinstance(key, str):
        key = str(key)
    return key[:1].upper() + key[1:]


def format_scalar(value: Any) -> str:
    """Display form of a scalar cell: JSON literals for bools, blank for None."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float, str)):
        return str(value)
    try:
        return json.dumps(value, ensure_ascii=False)
    except TypeError:
        return str(value)
