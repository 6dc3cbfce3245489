"""FastAPI application factory for the Color API.

This module provides the `create_app()` function that constructs and configures
the FastAPI application instance. This factory pattern allows:
- Easy testing (create app instances in tests, inject a document store)
- Clear separation of app creation from app execution

## App Structure

The FastAPI app includes:
- **Routes**: color routes (`/api`, `/api/color[/{key}]`) and probes
  (`/up`, `/health`, `/ready`)
- **Middleware**: CORS, request logger, exception handler
- **Metrics**: Prometheus instrumentation at `/metrics`
- **Lifespan**: opens the document store on startup, closes it on shutdown
- **OpenAPI**: Auto-generated documentation at `/docs` and `/redoc`

## Usage

```python
from api.app import create_app

app = create_app()
# Use with uvicorn: uvicorn main:app
```
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from logging.config import dictConfig

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException

from api import health
from api.errors import error_response
from api.middleware import (
    PROBE_PATHS,
    ExceptionHandlerMiddleware,
    LoggerMiddleware,
)
from api.routes import router
from clients import create_document_store
from clients.interfaces.document_store import DocumentStore
from config import APIConfig
from core.exceptions import BadRequestError, ColorAPIError, DatabaseConnectionError, NotFoundError
from foundation.logger import build_logging_config

logger = logging.getLogger("uvicorn.error")


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}" if location else error.get("msg", "invalid"))
    return "; ".join(parts) or "Invalid request"


def create_app(*, document_store: DocumentStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        document_store: Store to serve from. If None, the lifespan builds a
            MongoDB store from environment settings; a missing database
            configuration or an unreachable server then fails startup.

    Returns:
        A configured `FastAPI` instance ready to use with uvicorn.

    Note:
        Middleware order matters: CORS first, then request logger and
        exception handler.
    """
    #             ╭─────────────────────────────────────────────────────────╮
    #             │                        Logging                          │
    #             ╰─────────────────────────────────────────────────────────╯

    dictConfig(config=build_logging_config(APIConfig.from_env().log_level))

    #             ╭─────────────────────────────────────────────────────────╮
    #             │                        Lifespan                         │
    #             ╰─────────────────────────────────────────────────────────╯

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = document_store if document_store is not None else create_document_store()
        app.state.shutting_down = False

        await store.connect_async()
        app.state.document_store = store
        logger.info("Color API started")

        yield

        app.state.shutting_down = True
        await store.close_async()
        logger.info("Color API stopped")

    app = FastAPI(
        title="Color API",
        description="Key/value store of named colors backed by MongoDB.",
        version="0.1.0",
        lifespan=lifespan,
        license_info={
            "name": "MIT",
            "url": "https://opensource.org/licenses/MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Startup, liveness and readiness probes for Kubernetes",
            },
            {
                "name": "colors",
                "description": "Create, read, update and delete colors",
            },
        ],
    )

    #             ╭─────────────────────────────────────────────────────────╮
    #             │                        Middleware                       │
    #             ╰─────────────────────────────────────────────────────────╯

    # First in fires first when request received; last after response generated.
    app.add_middleware(
        middleware_class=CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggerMiddleware)
    app.add_middleware(ExceptionHandlerMiddleware)

    #             ╭─────────────────────────────────────────────────────────╮
    #             │                   Exception Handlers                    │
    #             ╰─────────────────────────────────────────────────────────╯

    @app.exception_handler(RequestValidationError)
    async def validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        """Answer malformed or missing input with 400 instead of FastAPI's 422."""
        message = _format_validation_errors(exc)
        logger.warning("validation error", extra={"error": {"statuscode": 400, "message": message}})
        return error_response(400, message)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(_request: Request, exc: HTTPException) -> JSONResponse:
        """Render framework HTTP errors (unknown route, bad method) as JSON."""
        logger.warning("http exception", extra={"error": {"statuscode": exc.status_code}})
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(BadRequestError)
    async def bad_request_handler(_request: Request, exc: BadRequestError) -> JSONResponse:
        logger.warning("bad request", extra={"error": {"statuscode": 400, "message": str(exc)}})
        return error_response(400, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("not found", extra={"error": {"statuscode": 404, "message": str(exc)}})
        return error_response(404, str(exc))

    @app.exception_handler(DatabaseConnectionError)
    async def database_error_handler(_request: Request, exc: DatabaseConnectionError) -> JSONResponse:
        logger.exception("database unavailable", extra={"error": {"statuscode": 500, "message": str(exc)}})
        return error_response(500, str(exc))

    @app.exception_handler(ColorAPIError)
    async def color_api_error_handler(_request: Request, exc: ColorAPIError) -> JSONResponse:
        logger.exception("color api error", extra={"error": {"statuscode": 500, "message": str(exc)}})
        return error_response(500, str(exc))

    #             ╭─────────────────────────────────────────────────────────╮
    #             │                        Routers                          │
    #             ╰─────────────────────────────────────────────────────────╯

    app.include_router(health.router)
    app.include_router(router)

    #             ╭─────────────────────────────────────────────────────────╮
    #             │                        Metrics                          │
    #             ╰─────────────────────────────────────────────────────────╯

    Instrumentator(excluded_handlers=["/metrics", *sorted(PROBE_PATHS)]).instrument(app=app).expose(app=app)

    return app
