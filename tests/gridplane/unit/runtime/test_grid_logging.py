from __future__ import annotations

import json
import logging

from gridplane.runtime.logging import JsonFormatter, setup_grid_logging


def test_setup_grid_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.delenv("GRIDPLANE_LOG_FILE", raising=False)
        monkeypatch.setenv("GRIDPLANE_LOG_LEVEL", "DEBUG")
        setup_grid_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_grid_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_grid_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord(
        name="gridplane.runtime.scene",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="object_added id=%d",
        args=(3,),
        exc_info=None,
    )
    record.kind = "circle"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "gridplane.runtime.scene"
    assert payload["msg"] == "object_added id=3"
    assert payload["fields"] == {"kind": "circle"}
