import json
import logging

from finguru.logging import JsonFormatter, configure_logging


def test_json_formatter_emits_one_object() -> None:
    record = logging.LogRecord("finguru.test", logging.INFO, __file__, 1, "accepted %s", ("BudgetRequest",), None)

    line = json.loads(JsonFormatter().format(record))

    assert line == {"lvl": "INFO", "msg": "accepted BudgetRequest", "logger": "finguru.test"}


def test_configure_logging_replaces_root_handlers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug", json_output=True)

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_json_formatter_includes_request_context() -> None:
    record = logging.LogRecord("finguru.test", logging.INFO, __file__, 1, "rejected", (), None)
    record.shape = "AccountRequest"
    record.violations = ["Account name is required"]

    line = json.loads(JsonFormatter().format(record))

    assert line["shape"] == "AccountRequest"
    assert line["violations"] == ["Account name is required"]
    assert "target_id" not in line
