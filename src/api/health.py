"""Health check endpoints for Kubernetes probes.

- `GET /up`: startup probe. 200 `ok` as soon as the process serves HTTP.
- `GET /health`: liveness probe. 200 `ok` while the app is serving, 503 once
  shutdown has begun. Never touches the database, so a database outage does
  not make Kubernetes restart the pod.
- `GET /ready`: readiness probe. Pings the database on every call and answers
  200 `ok` only while the connection is healthy, 503 otherwise. A restored
  connection turns the probe green again without a restart.
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from api.errors import error_response
from api.models import ErrorResponse

router = APIRouter(tags=["health"])

_UNAVAILABLE = {503: {"model": ErrorResponse, "description": "Not live / not ready"}}


@router.get("/up", response_class=PlainTextResponse)
async def up() -> str:
    """Report that the process is running."""
    return "ok"


@router.get("/health", response_class=PlainTextResponse, responses=_UNAVAILABLE)
async def health(request: Request) -> Response:
    """Liveness probe endpoint."""
    if getattr(request.app.state, "shutting_down", False):
        return error_response(503, "Service is shutting down")
    return PlainTextResponse("ok")


@router.get("/ready", response_class=PlainTextResponse, responses=_UNAVAILABLE)
async def ready(request: Request) -> Response:
    """Readiness probe endpoint."""
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        return error_response(503, "Database connection is not initialized")

    if not await store.ping_async():
        reason = store.readiness.reason or "connection unavailable"
        return error_response(503, f"Database is not ready: {reason}")

    return PlainTextResponse("ok")
