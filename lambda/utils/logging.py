import logging as _logging
import os
import re
import sys
import uuid
from contextvars import ContextVar

LOGGER_NAME = "web_reader"

REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

_logger = _logging.getLogger(LOGGER_NAME)


class RequestIdFilter(_logging.Filter):
    def filter(self, record: _logging.LogRecord) -> bool:
        record.request_id = _request_id.get() or "-"
        return True


def configure(level: str | None = None):
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    handler = _logging.StreamHandler(sys.stdout)
    handler.setFormatter(_logging.Formatter(
        "[%(asctime)s] [%(levelname)s] [%(request_id)s] %(message)s",
        datefmt="%H:%M:%S",
    ))
    handler.addFilter(RequestIdFilter())

    _logger.handlers.clear()
    _logger.addHandler(handler)
    _logger.setLevel(getattr(_logging, level, _logging.INFO))
    _logger.propagate = False


def set_request_id(request_id: str | None = None) -> str:
    # Ids from clients end up in log lines and response headers
    if not request_id or not REQUEST_ID_PATTERN.fullmatch(request_id):
        request_id = uuid.uuid4().hex[:12]
    _request_id.set(request_id)
    return request_id


def get_request_id() -> str | None:
    return _request_id.get()


def clear_request_id():
    _request_id.set(None)


def debug(message: str, *args):
    _logger.debug(message, *args)


def info(message: str, *args):
    _logger.info(message, *args)


def warning(message: str, *args):
    _logger.warning(message, *args)


def error(message: str, *args):
    _logger.error(message, *args)


def exception(message: str, *args):
    _logger.exception(message, *args)


configure()
