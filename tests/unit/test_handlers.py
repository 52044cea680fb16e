from __future__ import annotations

import pytest

from json_table_viewer.errors import FetchFailure
from json_table_viewer.handlers import (
    NO_SORT,
    expand_row,
    load_records_handler,
    next_page_handler,
    page_change_handler,
    prev_page_handler,
    sort_change_handler,
    sort_state_from_inputs,
)
from json_table_viewer.schema import ASCEND, DESCEND


def _patch_fetch(monkeypatch, result=None, error=None):
    calls = []

    async def fake_fetch(endpoint, *, client=None, timeout=10.0):
        calls.append((endpoint, timeout))
        if error is not None:
            raise error
        return result

    monkeypatch.setattr("json_table_viewer.store.fetch_records", fake_fetch)
    return calls


@pytest.mark.asyncio
async def test_load_records_handler_swaps_skeleton_for_table(monkeypatch, users):
    monkeypatch.setenv("TABLE_VIEWER_ENDPOINT", "https://example.test/users")
    calls = _patch_fetch(monkeypatch, result=users)

    (records, page, skeleton, panel, frame, page_number,
     summary, sort_dropdown, expansion, expanded) = await load_records_handler()

    assert calls == [("https://example.test/users", 10.0)]
    assert records == users
    assert page == 1
    assert skeleton["visible"] is False
    assert panel["visible"] is True
    assert list(frame.columns) == ["Id", "Name", "Username", "Email", "Phone"]
    assert len(frame) == 5
    assert summary == "Page 1 of 3 · 12 records"
    assert sort_dropdown["choices"][0] == (NO_SORT, NO_SORT)
    assert ("Email", "email") in sort_dropdown["choices"]
    assert expansion == ""
    assert expanded is None


@pytest.mark.asyncio
async def test_load_records_handler_failure_is_ready_and_empty(monkeypatch):
    _patch_fetch(monkeypatch, error=FetchFailure("https://example.test", "request_failed"))

    records, _, skeleton, panel, frame, _, summary, sort_dropdown, _, _ = await load_records_handler()

    assert records == []
    assert skeleton["visible"] is False
    assert panel["visible"] is True
    assert frame.empty
    assert summary == "Page 1 of 1 · 0 records"
    assert sort_dropdown["choices"] == [(NO_SORT, NO_SORT)]


def test_sort_state_from_inputs():
    assert sort_state_from_inputs(None, ASCEND) is None
    assert sort_state_from_inputs(NO_SORT, DESCEND) is None
    state = sort_state_from_inputs("name", None)
    assert (state.key, state.order) == ("name", ASCEND)


def test_page_change_handler_accepts_out_of_range_pages(users):
    page, number, frame, summary, expansion, expanded = page_change_handler(
        users, 1, 9, NO_SORT, ASCEND
    )

    assert page == number == 9
    assert frame.empty
    assert list(frame.columns) == ["Id", "Name", "Username", "Email", "Phone"]
    assert summary == "Page 9 of 3 · 12 records"
    assert (expansion, expanded) == ("", None)


def test_page_change_handler_keeps_page_when_input_cleared(users):
    page, _, frame, _, _, _ = page_change_handler(users, 2, None, NO_SORT, ASCEND)

    assert page == 2
    assert frame["Id"].tolist() == ["6", "7", "8", "9", "10"]


def test_prev_and_next_stay_within_page_control_range(users):
    assert prev_page_handler(users, 1, NO_SORT, ASCEND)[0] == 1
    assert prev_page_handler(users, 3, NO_SORT, ASCEND)[0] == 2
    assert next_page_handler(users, 2, NO_SORT, ASCEND)[0] == 3
    assert next_page_handler(users, 3, NO_SORT, ASCEND)[0] == 3
    assert next_page_handler([], 1, NO_SORT, ASCEND)[0] == 1


def test_sort_change_handler_sorts_current_page(users):
    frame, expansion, expanded = sort_change_handler(users, 2, "id", DESCEND)

    assert frame["Id"].tolist() == ["10", "9", "8", "7", "6"]
    assert (expansion, expanded) == ("", None)


def test_expand_row_toggles_panel(users):
    markdown, key = expand_row(users, 1, NO_SORT, ASCEND, None, 1)

    assert key == "2"
    assert markdown.startswith("#### Address")
    assert "#### Company" in markdown

    assert expand_row(users, 1, NO_SORT, ASCEND, key, 1) == ("", None)


def test_expand_row_follows_sorted_order(users):
    _, key = expand_row(users, 1, "id", DESCEND, None, 0)

    assert key == "5"


def test_expand_row_without_nested_fields_or_id():
    markdown, key = expand_row([{"name": "a"}], 1, NO_SORT, ASCEND, None, 0)

    assert markdown == ""
    assert key == "#0"


def test_expand_row_ignores_rows_outside_page(users):
    assert expand_row(users, 3, NO_SORT, ASCEND, None, 4) == ("", None)



@pytest.mark.asyncio
async def test_load_records_handler_malformed_endpoint_still_shows_table(monkeypatch):
    monkeypatch.setenv("TABLE_VIEWER_ENDPOINT", "https://[::1/users")

    records, _, skeleton, panel, frame, _, _, _, _, _ = await load_records_handler()

    assert records == []
    assert skeleton["visible"] is False
    assert panel["visible"] is True
    assert frame.empty


def test_each_session_gets_its_own_columns(users):
    people = [{"id": 1, "title": "Dr", "meta": {"a": 1}}]

    first = page_change_handler(users, 1, 1, NO_SORT, ASCEND)[2]
    second = page_change_handler(people, 1, 1, NO_SORT, ASCEND)[2]
    again = page_change_handler(users, 1, 1, NO_SORT, ASCEND)[2]

    assert list(first.columns) == ["Id", "Name", "Username", "Email", "Phone"]
    assert list(second.columns) == ["Id", "Title"]
    assert list(again.columns) == list(first.columns)
