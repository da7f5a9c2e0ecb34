import logging

from querykit.logging.filters import (
    ContextFilter,
    clear_request_context,
    set_logging_context,
    set_request_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="sample",
        args=(),
        exc_info=None,
    )


def test_context_filter_respects_static_environment():
    set_logging_context(environment="qa", extra={"region": "us-east"})
    record = _record()
    assert ContextFilter().filter(record)
    assert getattr(record, "environment") == "qa"
    assert getattr(record, "region") == "us-east"


def test_context_filter_uses_request_context():
    set_logging_context(environment=None, extra=None)
    set_request_context(request_id="req-1", user_id="user-7")
    try:
        record = _record()
        assert ContextFilter().filter(record)
        assert record.request_id == "req-1"
        assert record.user_id == "user-7"
    finally:
        clear_request_context()


def test_context_filter_no_config_is_graceful():
    set_logging_context(environment=None, extra=None)
    record = _record()
    assert ContextFilter().filter(record)
    assert not hasattr(record, "environment")
    assert record.request_id is None
    assert record.sdk_name == "querykit"


def test_static_context_does_not_override_record_extras():
    set_logging_context(extra={"sql": "static"})
    record = _record()
    record.sql = "SELECT 1"
    ContextFilter().filter(record)
    assert record.sql == "SELECT 1"
