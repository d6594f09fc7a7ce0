"""
Logging setup for the author service.

Console output is human-readable or JSON depending on
``LOG_CONSOLE_FORMAT``. Errors are also appended as JSON lines to
``LOG_FILE_PATH``. Every line carries the request's correlation id and
whatever ``set_log_context`` attached to the current request.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any

from author_service.middlewares.correlation_id import get_correlation_id
from author_service.settings import app_settings

_request_fields: ContextVar[dict[str, Any]] = ContextVar(
    "request_fields", default={}
)


def set_log_context(**fields: Any) -> None:
    """
    Attach ``fields`` to every record logged for the current request.

    Example:
        >>> set_log_context(endpoint="/authors", method="GET")
    """
    _request_fields.set({**_request_fields.get(), **fields})


def get_log_context() -> dict[str, Any]:
    return _request_fields.get()


def clear_log_context() -> None:
    _request_fields.set({})


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record, request fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        request_id = get_correlation_id()
        if request_id:
            entry["request_id"] = request_id
        entry.update(get_log_context())
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    """``time [request id] LEVEL logger: message`` for local runs."""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s [%(correlation_id)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        record.correlation_id = get_correlation_id() or "-"
        return super().format(record)


def setup_logging() -> logging.Logger:
    """Install the console and error-file handlers on the root logger."""
    root = logging.getLogger()
    root.setLevel(app_settings.LOG_LEVEL.upper())
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    if app_settings.LOG_CONSOLE_FORMAT == "json":
        console.setFormatter(StructuredJSONFormatter())
    else:
        console.setFormatter(HumanReadableFormatter())
    root.addHandler(console)

    try:
        error_file = logging.FileHandler(app_settings.LOG_FILE_PATH)
    except OSError as e:
        root.warning(f"Error log file disabled: {e}")
    else:
        error_file.setLevel(logging.ERROR)
        error_file.setFormatter(StructuredJSONFormatter())
        root.addHandler(error_file)

    # Keep test output quiet
    if "pytest" in sys.argv[0]:
        logging.disable(logging.ERROR)

    return root


logger = setup_logging()
