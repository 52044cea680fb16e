"""Composes store state, inferred columns and the current page into one view."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .pagination import PageState, page_count, slice_page, with_total
from .schema import ASCEND, Column, find_column, infer_columns, sort_rows
from .values import format_scalar

ROW_KEY = 'id'


class ViewPhase(str, enum.Enum):
    LOADING = 'loading'
    READY = 'ready'


@dataclass(frozen=True)
class SortState:
    key: Optional[str] = None
    order: str = ASCEND


@dataclass(frozen=True)
class PaginationProps:
    current: int
    page_size: int
    total: int


@dataclass
class TableView:
    phase: ViewPhase
    columns: List[Column] = field(default_factory=list)
    rows: List[Dict[str, Any]] = field(default_factory=list)
    pagination: Optional[PaginationProps] = None

    @property
    def row_keys(self) -> List[Any]:
        return [row.get(ROW_KEY) for row in self.rows]


def build_table_view(
    records: Sequence[Dict[str, Any]],
    loading: bool,
    page_state: PageState,
    sort_state: Optional[SortState] = None,
) -> TableView:
    if loading:
        return TableView(phase=ViewPhase.LOADING)

    columns = infer_columns(records)
    page_state = with_total(page_state, len(records))
    rows = slice_page(records, page_state)

    # The sorter only ever sees the rows handed to the grid: the current page.
    if sort_state is not None:
        rows = sort_rows(rows, find_column(columns, sort_state.key), sort_state.order)

    return TableView(
        phase=ViewPhase.READY,
        columns=columns,
        rows=rows,
        pagination=PaginationProps(
            current=page_state.current_page,
            page_size=page_state.page_size,
            total=page_state.total,
        ),
    )


def to_dataframe(view: TableView) -> pd.DataFrame:
    headers = [column.title for column in view.columns]
    data = [
        [format_scalar(row.get(column.key)) for column in view.columns]
        for row in view.rows
    ]
    return pd.DataFrame(data, columns=headers)


def pagination_summary(view: TableView) -> str:
    if view.pagination is None:
        return ''
    props = view.pagination
    pages = page_count(PageState(props.current, props.page_size, props.total))
    noun = 'record' if props.total == 1 else 'records'
    return f"Page {props.current} of {max(pages, 1)} · {props.total} {noun}"
