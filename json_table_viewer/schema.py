"""Column inference for the record table.

Columns come from the first record only: every field whose sample value is a
scalar (None included) becomes a sortable column, in the record's key order.
Nested fields are left for the expansion panel.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Sequence

from .values import capitalize_label, is_nested

ASCEND = 'ascend'
DESCEND = 'descend'


def _greater(left: Any, right: Any) -> bool:
    # None sorts below every other value; other unorderable pairs are not greater.
    if left is None or right is None:
        return left is not None
    try:
        return bool(left > right)
    except TypeError:
        return False


@dataclass(frozen=True)
class Column:
    title: str
    key: str

    def compare(self, a: Dict[str, Any], b: Dict[str, Any]) -> int:
        """Return 1 when a's value is strictly greater, else -1 (ties put a first)."""
        return 1 if _greater(a.get(self.key), b.get(self.key)) else -1


def nested_field_names(record: Dict[str, Any]) -> List[str]:
    return [key for key, value in record.items() if is_nested(value)]


def infer_columns(records: Sequence[Dict[str, Any]]) -> List[Column]:
    if not records:
        return []

    sample = records[0]
    return [
        Column(title=capitalize_label(key), key=key)
        for key, value in sample.items()
        if not is_nested(value)
    ]


def find_column(columns: Sequence[Column], key: Optional[str]) -> Optional[Column]:
    if key is None:
        return None
    for column in columns:
        if column.key == key:
            return column
    return None


def sort_rows(
    rows: Sequence[Dict[str, Any]],
    column: Optional[Column],
    order: str = ASCEND,
) -> List[Dict[str, Any]]:
    """Sort rows with the column comparator; descend negates its result."""
    if column is None:
        return list(rows)

    if order == DESCEND:
        key = cmp_to_key(lambda a, b: -column.compare(a, b))
    else:
        key = cmp_to_key(column.compare)
    return sorted(rows, key=key)

