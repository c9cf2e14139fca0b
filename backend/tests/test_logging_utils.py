import logging

import pytest

from utils.logging_utils import (
    RequestContextFilter,
    StructuredLogger,
    clear_logging_context,
    log_operation,
    set_logging_context,
)


@pytest.fixture(autouse=True)
def reset_context():
    clear_logging_context()
    yield
    clear_logging_context()


def test_context_is_merged_and_cleared(caplog):
    set_logging_context(request_id="req-1")
    set_logging_context(path="/health")

    with caplog.at_level(logging.INFO, logger="structured.test"):
        StructuredLogger("structured.test").info("first")
        clear_logging_context()
        StructuredLogger("structured.test").info("second")

    first, second = caplog.records[-2:]
    assert (first.request_id, first.path) == ("req-1", "/health")
    assert not hasattr(second, "path")


def test_request_filter_uses_context_or_dash():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    RequestContextFilter().filter(record)
    assert record.request_id == "-"

    set_logging_context(request_id="req-2")
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    RequestContextFilter().filter(record)
    assert record.request_id == "req-2"


def test_structured_logger_adds_context(caplog):
    set_logging_context(request_id="req-3")

    with caplog.at_level(logging.INFO, logger="structured.test"):
        StructuredLogger("structured.test").info("Form updated", extra={"form_id": "f-1"})

    record = caplog.records[-1]
    assert record.request_id == "req-3"
    assert record.form_id == "f-1"


def test_log_operation_records_ids_and_failures(caplog):
    @log_operation("update_form")
    def update_form(form_id, request=None):
        raise ValueError("nope")

    with caplog.at_level(logging.INFO):
        with pytest.raises(ValueError):
            update_form("f-9")

    messages = [r.getMessage() for r in caplog.records]
    assert "Starting update_form" in messages
    assert "Failed update_form: nope" in messages
    assert caplog.records[-1].form_id == "f-9"
    assert caplog.records[-1].error_type == "ValueError"
