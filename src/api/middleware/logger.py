"""Request logging middleware for the Color API.

This middleware provides structured JSON logging for HTTP requests, logging
both request start and completion with timing information.
"""

import time
from collections.abc import Awaitable, Callable
from logging import Logger, getLogger

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

# Kubernetes probe endpoints, kept out of the access log
PROBE_PATHS = frozenset({"/up", "/health", "/ready"})

# Separate logger so records do not mix with uvicorn.access
logger: Logger = getLogger("colorapi.access")


class LoggerMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests with structured JSON output.

    This middleware logs:
    - Request start: path, method, remote address
    - Request completion: path, status code, method, duration, remote address

    Probe endpoints (`/up`, `/health`, `/ready`) are not logged.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and log start/completion with timing.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or route handler in the chain.

        Returns:
            The HTTP response.
        """
        path: str = request.url.path
        if path in PROBE_PATHS:
            return await call_next(request)

        if request.query_params:
            path += f"?{request.query_params}"
        remote_addr = request.client.host if request.client else "unknown"

        logger.info(
            msg="request started",
            extra={"request": {"path": path, "method": request.method, "remoteAddr": remote_addr}},
        )

        start_time: float = time.perf_counter()
        response: Response = await call_next(request)
        finish_time: float = time.perf_counter()

        logger.info(
            msg="request completed",
            extra={
                "response": {
                    "path": path,
                    "statuscode": response.status_code,
                    "method": request.method,
                    "since": finish_time - start_time,
                    "remoteAddr": remote_addr,
                }
            },
        )

        return response
