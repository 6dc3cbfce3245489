"""Exception handler middleware for the Color API.

This middleware catches exceptions that escape the app's exception handlers
and converts them to HTTP responses with the standard JSON error body.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from api.errors import error_response
from core.exceptions import BadRequestError, ColorAPIError, DatabaseConnectionError, NotFoundError

logger = logging.getLogger("uvicorn.error")


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware to handle exceptions and convert them to HTTP responses.

    This middleware catches:
    - ColorAPIError hierarchy: Converts to appropriate HTTP status codes
        - BadRequestError → 400
        - NotFoundError → 404
        - DatabaseConnectionError → 500
        - ColorAPIError (base) → 500
    - HTTPException: Returns its status with the error detail
    - Other exceptions: Returns 500 with a generic error message

    Note:
        Internal details of unexpected exceptions are logged, never returned.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and handle any exceptions.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or route handler in the chain.

        Returns:
            The HTTP response, or an error response if an exception occurred.
        """
        try:
            return await call_next(request)

        except BadRequestError as e:
            logger.warning("bad request", extra={"error": {"statuscode": 400, "message": str(e)}})
            return error_response(400, str(e))

        except NotFoundError as e:
            logger.warning("not found", extra={"error": {"statuscode": 404, "message": str(e)}})
            return error_response(404, str(e))

        except DatabaseConnectionError as e:
            logger.exception("database unavailable", extra={"error": {"statuscode": 500, "message": str(e)}})
            return error_response(500, str(e))

        except ColorAPIError as e:
            logger.exception("color api error", extra={"error": {"statuscode": 500, "message": str(e)}})
            return error_response(500, str(e))

        except HTTPException as http_exception:
            logger.warning(
                "http exception",
                extra={"error": {"statuscode": http_exception.status_code}},
            )
            return error_response(http_exception.status_code, str(http_exception.detail))

        except Exception as e:
            # Final catch-all: answer 500 rather than dropping the connection.
            logger.exception("internal error", extra={"error": {"statuscode": 500, "message": str(e)}})
            return error_response(500, "An unexpected error occurred.")
