"""Observability tests — JSON log format, structured extras, handler setup."""

import json
import logging

from board.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "board.test", logging.INFO, __file__, 1, "Message created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "board.test"
    assert out["message"] == "Message created"
    assert "timestamp" in out


def test_json_formatter_surfaces_extras():
    out = json.loads(JSONFormatter().format(_record(message_id="m-1", error_code="X")))
    assert out["message_id"] == "m-1"
    assert out["error_code"] == "X"
    assert "path" not in out


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    board_handlers = [h for h in logging.root.handlers if h.get_name() == "board"]
    assert len(board_handlers) == 1
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.WARNING
    for h in board_handlers:
        logging.root.removeHandler(h)
