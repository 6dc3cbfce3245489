"""Core domain models, services, and shared types for the Color API.

This module provides shared domain code used across all layers:
- Exception hierarchy for error handling
- The `Color` domain model
- The color repository service (no FastAPI dependencies)
"""

from .exceptions import (
    BadRequestError,
    ColorAPIError,
    DatabaseConnectionError,
    NotFoundError,
)
from .models import Color

__all__ = [
    "BadRequestError",
    "Color",
    "ColorAPIError",
    "DatabaseConnectionError",
    "NotFoundError",
]
