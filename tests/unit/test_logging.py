from __future__ import annotations

import json
import logging
import sys

from json_table_viewer.logging_utils import JsonFormatter, _json_formatter, configure_logging


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="json_table_viewer.store",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_extra_fields() -> None:
    record = _record("Loaded 12 records")
    record.records = 12

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "json_table_viewer.store"
    assert payload["message"] == "Loaded 12 records"
    assert payload["records"] == 12
    assert "lineno" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            name="x", level=logging.ERROR, pathname=__file__, lineno=1,
            msg="failed", args=(), exc_info=sys.exc_info(),
        )

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_sets_root_level_and_quiets_httpx() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(level="debug", json_logs=True)

        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[-1].formatter, JsonFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
