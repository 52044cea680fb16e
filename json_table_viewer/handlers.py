from typing import Any, Dict, List, Optional, Tuple

import gradio as gr

from .config import get_settings
from .expansion import render_expansion_markdown, render_expansion_text
from .logging_utils import get_logger
from .pagination import PAGE_SIZE, PageState, change_page, page_count
from .schema import ASCEND, DESCEND
from .store import RecordStore
from .view import (
    ROW_KEY,
    SortState,
    TableView,
    build_table_view,
    pagination_summary,
    to_dataframe,
)

log = get_logger(__name__)

NO_SORT = "(none)"
SORT_ORDERS = [("Ascending", ASCEND), ("Descending", DESCEND)]


def sort_state_from_inputs(sort_key: Optional[str], sort_order: Optional[str]) -> Optional[SortState]:
    if not sort_key or sort_key == NO_SORT:
        return None
    return SortState(key=sort_key, order=sort_order or ASCEND)


def current_view(records, page: int, sort_key=None, sort_order=None) -> TableView:
    records = records or []
    return build_table_view(
        records,
        loading=False,
        page_state=PageState(current_page=int(page or 1), page_size=PAGE_SIZE),
        sort_state=sort_state_from_inputs(sort_key, sort_order),
    )


def sort_choices(view: TableView) -> List[Tuple[str, str]]:
    return [(NO_SORT, NO_SORT)] + [(column.title, column.key) for column in view.columns]


def render_page(records, page: int, sort_key=None, sort_order=None):
    """Rows and pagination summary for a page; collapses any open expansion."""
    view = current_view(records, page, sort_key, sort_order)
    return page, page, to_dataframe(view), pagination_summary(view), "", None


async def load_records_handler():
    """Mount handler: fetch once, then swap the skeleton for the table."""
    settings = get_settings()
    store = RecordStore(settings.endpoint_url, timeout=settings.request_timeout)
    await store.load()

    view = build_table_view(
        store.records,
        loading=store.loading,
        page_state=PageState(current_page=1, page_size=PAGE_SIZE),
    )
    return (
        store.records,
        1,
        gr.update(visible=False),
        gr.update(visible=True),
        to_dataframe(view),
        gr.update(value=1),
        pagination_summary(view),
        gr.update(choices=sort_choices(view), value=NO_SORT),
        "",
        None,
    )


def page_change_handler(records, current_page: int, requested_page, sort_key, sort_order):
    # The page input overwrites the current page as-is; out-of-range pages render empty.
    if requested_page is None:
        return render_page(records, current_page, sort_key, sort_order)
    state = change_page(PageState(current_page=int(current_page), page_size=PAGE_SIZE), requested_page)
    return render_page(records, state.current_page, sort_key, sort_order)


def prev_page_handler(records, current_page: int, sort_key, sort_order):
    return render_page(records, max(1, int(current_page) - 1), sort_key, sort_order)


def next_page_handler(records, current_page: int, sort_key, sort_order):
    state = PageState(current_page=int(current_page), page_size=PAGE_SIZE, total=len(records or []))
    last_page = max(page_count(state), 1)
    return render_page(records, min(int(current_page) + 1, last_page), sort_key, sort_order)


def sort_change_handler(records, current_page: int, sort_key, sort_order):
    view = current_view(records, current_page, sort_key, sort_order)
    return to_dataframe(view), "", None


def row_key(row: Dict[str, Any], position: int) -> str:
    value = row.get(ROW_KEY)
    return f"#{position}" if value is None else str(value)


def expand_row(records, current_page: int, sort_key, sort_order, expanded_key, row_index: int):
    """Toggle the expansion panel for the row at `row_index` on the current page."""
    view = current_view(records, current_page, sort_key, sort_order)
    if row_index < 0 or row_index >= len(view.rows):
        return "", None

    row = view.rows[row_index]
    key = row_key(row, row_index)
    if key == expanded_key:
        return "", None

    log.debug("Expanding row %s\n%s", key, render_expansion_text(row))
    return render_expansion_markdown(row), key


def row_select_handler(records, current_page: int, sort_key, sort_order, expanded_key, evt: gr.SelectData):
    index = evt.index
    row_index = index[0] if isinstance(index, (list, tuple)) else index
    return expand_row(records, current_page, sort_key, sort_order, expanded_key, int(row_index))
