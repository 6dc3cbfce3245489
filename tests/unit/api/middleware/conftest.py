"""Log capture fixtures for middleware tests."""

import logging

import pytest

# Loggers written by the middleware; dictConfig makes them non-propagating
MIDDLEWARE_LOGGERS = ("colorapi.access", "uvicorn.access", "uvicorn.error")


@pytest.fixture(autouse=True)
def attach_caplog_handler(caplog):
    """Route middleware log records into `caplog` even when they do not propagate."""
    loggers = [logging.getLogger(name) for name in MIDDLEWARE_LOGGERS]
    added = [logger for logger in loggers if caplog.handler not in logger.handlers]
    for logger in added:
        logger.addHandler(caplog.handler)

    yield

    for logger in added:
        logger.removeHandler(caplog.handler)
