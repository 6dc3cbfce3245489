"""Logging configuration with structured JSON formatter.

This module provides a JSON formatter for log records and the `dictConfig`
dictionary applied by the app factory. Every line written to stdout is a single
JSON object so the container logs can be shipped without further parsing.
"""

import json
import logging
from typing import Any

# LogRecord attributes that are either rendered explicitly or internal
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
        "asctime",
        "request",
        "response",
        "error",
        "color_message",
    }
)


class CustomJSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging.

    This formatter converts log records to JSON format, including:
    - Standard log fields (time, level, message, etc.)
    - Request/response information from LoggerMiddleware
    - Error information from ExceptionHandlerMiddleware
    - All extra attributes passed via the extra parameter
    """

    def __init__(self, fmt: str) -> None:
        """Initialize the formatter.

        Args:
            fmt: Format string (used for asctime, but output is JSON).
        """
        logging.Formatter.__init__(self, fmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON string representation of the log record.
        """
        logging.Formatter.format(self, record)
        return json.dumps(self.get_log(record), indent=None, default=str)

    def get_log(self, record: logging.LogRecord) -> dict[str, Any]:
        """Extract log data from record into a dictionary.

        Args:
            record: The log record to extract data from.

        Returns:
            Dictionary containing log data.
        """
        d: dict[str, Any] = {
            "time": record.asctime,
            "process_id": record.process,
            "thread_name": record.threadName,
            "level": record.levelname,
            "logger_name": record.name,
            "pathname": record.pathname,
            "line": record.lineno,
            "message": record.message,
        }

        # Request start (LoggerMiddleware)
        request_data = getattr(record, "request", None)
        if isinstance(request_data, dict):
            for field in ("path", "method", "remoteAddr"):
                if request_data.get(field) is not None:
                    d[field] = request_data[field]

        # Request completion (LoggerMiddleware)
        response_data = getattr(record, "response", None)
        if isinstance(response_data, dict):
            for field in ("path", "method", "statuscode", "since", "remoteAddr"):
                if response_data.get(field) is not None:
                    d[field] = response_data[field]

        # Translated errors (exception handlers and ExceptionHandlerMiddleware)
        error_data = getattr(record, "error", None)
        if error_data is not None:
            if isinstance(error_data, dict):
                error_dict: dict[str, Any] = error_data.copy()
                if record.exc_info:
                    error_dict["trace"] = self.formatException(record.exc_info)
                d["error"] = error_dict
            else:
                d["error"] = error_data

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                d[key] = value

        return d


def build_logging_config(level: str = "INFO") -> dict[str, Any]:
    """Build the `dictConfig` dictionary for the service.

    Args:
        level: Log level for the application loggers (e.g. "INFO", "DEBUG").

    Returns:
        A logging configuration dictionary suitable for
        `logging.config.dictConfig`.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"()": lambda: CustomJSONFormatter(fmt="%(asctime)s")},
        },
        "handlers": {
            "default": {
                "formatter": "standard",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            # Suppress default access logs, LoggerMiddleware writes them instead
            "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "uvicorn.error": {"handlers": ["default"], "level": level, "propagate": False},
            "colorapi.access": {"handlers": ["default"], "level": level, "propagate": False},
            "colorapi.error": {"handlers": ["default"], "level": "ERROR", "propagate": False},
            "pymongo": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        },
        "root": {
            "handlers": ["default"],
            "level": level,
        },
    }
