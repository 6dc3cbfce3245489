"""Exception hierarchy for the Color API.

This module defines a framework-agnostic exception hierarchy that allows:
- Service layer code to raise errors without HTTP dependencies
- API code to translate exceptions into appropriate HTTP status codes
- Tests to handle errors consistently

## Exception Hierarchy

All exceptions inherit from `ColorAPIError`:

- `BadRequestError`: Client sent missing or malformed input (maps to HTTP 400)
- `NotFoundError`: No color stored under the requested key (maps to HTTP 404)
- `DatabaseConnectionError`: MongoDB is unreachable (maps to HTTP 500 on data
  requests; `/ready` reports 503)

## HTTP Mapping

```python
BadRequestError          → HTTP 400 (Bad Request)
NotFoundError            → HTTP 404 (Not Found)
DatabaseConnectionError  → HTTP 500 (Internal Server Error)
ColorAPIError (base)     → HTTP 500 (Internal Server Error)
```

## Usage

```python
from core.exceptions import BadRequestError, NotFoundError

if not key.strip():
    raise BadRequestError("Color key must not be empty")

document = await store.find_one_async(key)
if document is None:
    raise NotFoundError(f"Color '{key}' not found")
```
"""

from foundation.exceptions import UpstreamError


class ColorAPIError(Exception):
    """Base exception class for all Color API errors.

    This exception maps to HTTP 500 (Internal Server Error) if not caught
    and translated by a more specific exception handler.
    """


class BadRequestError(ColorAPIError):
    """Exception raised when the client provides invalid input.

    Examples:
        - `GET /api` without the `colorKey` query parameter
        - Blank color key
        - Unsupported `format` value
    """


class NotFoundError(ColorAPIError):
    """Exception raised when no color is stored under the requested key."""


class DatabaseConnectionError(ColorAPIError, UpstreamError):
    """Exception raised when MongoDB cannot be reached.

    Raised by the database client when the server is unreachable, when
    authentication fails, or when the client's circuit breaker is open.

    Note:
        We use `DatabaseConnectionError` instead of Python's built-in
        `ConnectionError` to avoid conflicts and keep our exception hierarchy.
    """
