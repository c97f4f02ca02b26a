"""
Unit tests for structured logging.
"""

import json
import logging

import pytest

from strictval.observability.logger import get_logger, log_operation, setup_logger


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def captured():
    handler = ListHandler()
    root = get_logger()
    root.addHandler(handler)
    yield handler
    root.removeHandler(handler)


def test_module_loggers_are_package_children():
    assert get_logger("strictval.core.rules.rule_engine").name == "strictval.core.rules.rule_engine"
    assert get_logger("other").name == "strictval.other"
    assert get_logger().name == "strictval"


def test_json_format(capsys):
    logger = setup_logger("strictval-json-test", level="INFO", format_type="json")
    logger.info("hello", extra={"field": "foo"})

    line = json.loads(capsys.readouterr().out.strip().splitlines()[-1])

    assert line["message"] == "hello"
    assert line["level"] == "INFO"
    assert line["field"] == "foo"
    assert line["logger"] == "strictval-json-test"


def test_log_operation_success(captured):
    with log_operation("Validating batch", batch_size=2):
        pass

    messages = [r.getMessage() for r in captured.records]
    assert "Starting: Validating batch" in messages
    assert "Completed: Validating batch" in messages
    assert captured.records[-1].status == "success"


def test_log_operation_failure_reraises(captured):
    with pytest.raises(RuntimeError):
        with log_operation("Validating batch"):
            raise RuntimeError("boom")

    assert captured.records[-1].status == "error"
    assert captured.records[-1].error_type == "RuntimeError"
