import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional
import uuid

SDK_LOGGER_NAME = "completion_sdk"
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIDFilter(logging.Filter):
    """Stamps each record with the id of the API call that emitted it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get() or "N/A"
        return True


def _sdk_handler(sdk_logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in sdk_logger.handlers:
        if any(isinstance(f, RequestIDFilter) for f in handler.filters):
            return handler
    return None


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the SDK logger.

    Calling it again only changes the level; the handler is installed once.
    """
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(log_level.upper())

    if _sdk_handler(sdk_logger) is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handler.addFilter(RequestIDFilter())
        sdk_logger.addHandler(handler)

    return sdk_logger


@contextmanager
def request_context(request_id: Optional[str] = None) -> Iterator[str]:
    """Bind a request id for the duration of one API call.

    The caller's id, if any, is restored on exit.
    """
    request_id = request_id or str(uuid.uuid4())
    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)
