"""Middleware for the Color API.

This module provides FastAPI middleware for request logging and error handling.
"""

from api.middleware.exception_handler import ExceptionHandlerMiddleware
from api.middleware.logger import PROBE_PATHS, LoggerMiddleware

__all__ = [
    "PROBE_PATHS",
    "ExceptionHandlerMiddleware",
    "LoggerMiddleware",
]
