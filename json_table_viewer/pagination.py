"""Client-side pagination over the in-memory record list."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, List, Sequence, Tuple

PAGE_SIZE = 5


@dataclass(frozen=True)
class PageState:
    current_page: int = 1
    page_size: int = PAGE_SIZE
    total: int = 0


def page_bounds(state: PageState) -> Tuple[int, int]:
    """Half-open [start, end) index range of the current page."""
    start = (state.current_page - 1) * state.page_size
    return start, state.current_page * state.page_size


def slice_page(records: Sequence[Any], state: PageState) -> List[Any]:
    # Past-the-end pages come back empty; there is no clamping against total.
    start, end = page_bounds(state)
    return list(records[start:end])


def change_page(state: PageState, page: int) -> PageState:
    return replace(state, current_page=int(page))


def with_total(state: PageState, total: int) -> PageState:
    return replace(state, total=int(total))


def page_count(state: PageState) -> int:
    if state.total <= 0 or state.page_size <= 0:
        return 0
    return math.ceil(state.total / state.page_size)
