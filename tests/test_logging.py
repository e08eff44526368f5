import logging
import pytest
from completion_sdk.core.logging import (
    RequestIDFilter,
    SDK_LOGGER_NAME,
    request_context,
    request_id_var,
    setup_logging,
)


def _record():
    return logging.LogRecord(SDK_LOGGER_NAME, logging.INFO, __file__, 1, "msg", None, None)


@pytest.fixture
def sdk_logger():
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    handlers = list(sdk_logger.handlers)
    yield sdk_logger
    sdk_logger.handlers = handlers
    sdk_logger.setLevel(logging.NOTSET)


def test_filter_injects_current_request_id():
    with request_context("req-1"):
        record = _record()
        assert RequestIDFilter().filter(record) is True
        assert record.request_id == "req-1"


def test_filter_defaults_when_no_request_id():
    token = request_id_var.set(None)
    try:
        record = _record()
        RequestIDFilter().filter(record)
        assert record.request_id == "N/A"
    finally:
        request_id_var.reset(token)


def test_filter_keeps_explicit_request_id():
    record = _record()
    record.request_id = "from-extra"
    with request_context("req-2"):
        RequestIDFilter().filter(record)
    assert record.request_id == "from-extra"


def test_request_context_generates_and_restores():
    token = request_id_var.set("outer")
    try:
        with request_context() as first:
            assert request_id_var.get() == first
            with request_context() as second:
                assert second != first
                assert request_id_var.get() == second
            assert request_id_var.get() == first
        assert request_id_var.get() == "outer"
    finally:
        request_id_var.reset(token)


def test_request_context_restores_after_error():
    token = request_id_var.set("outer")
    try:
        with pytest.raises(RuntimeError):
            with request_context("inner"):
                raise RuntimeError("boom")
        assert request_id_var.get() == "outer"
    finally:
        request_id_var.reset(token)


def test_setup_logging_configures_sdk_logger(sdk_logger):
    handlers = list(sdk_logger.handlers)

    assert setup_logging("debug") is sdk_logger
    assert sdk_logger.level == logging.DEBUG
    added = [h for h in sdk_logger.handlers if h not in handlers]
    assert len(added) == 1
    assert any(isinstance(f, RequestIDFilter) for f in added[0].filters)


def test_setup_logging_installs_handler_once(sdk_logger):
    setup_logging("info")
    count = len(sdk_logger.handlers)

    setup_logging("warning")
    setup_logging("error")

    assert len(sdk_logger.handlers) == count
    assert sdk_logger.level == logging.ERROR
