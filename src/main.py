"""Color API service (FastAPI).

This file is the **stable Uvicorn entrypoint** for the API container:

- Docker: `color-api` (or `uvicorn main:app --host 0.0.0.0 --port 80`)
- K8s probes: `GET /up` (startup), `GET /health` (liveness), `GET /ready` (readiness)

## High-level architecture

- **MongoDB**: single-replica StatefulSet behind a headless Service; colors
  live in `colordb.colors`, one document per key
- **Color API**: this service, exposed through a NodePort Service

## High-level data flow

HTTP request → router validates input → `ColorRepository` → `MongoClientWrapper`
→ MongoDB → formatted response

## Configuration (environment variables)

Configuration is loaded in `src/config.py` (see `Settings`), via env vars:

- `DB_USER`, `DB_PASSWORD`, `DB_HOST`, `DB_PORT`, `DB_NAME` or `DB_URL`
- `API_HOST`, `API_PORT`, `LOG_LEVEL`

## Code organization

- `src/config.py`: settings + env loading
- `src/api/models.py`: Pydantic request/response models
- `src/clients/*`: MongoDB client wrapper and the `DocumentStore` interface
- `src/core/services/*`: color repository (no FastAPI dependencies)
- `src/api/routes.py`, `src/api/health.py`: HTTP routing
- `src/api/app.py`: FastAPI app factory (`create_app`)
"""

import logging
import sys

import uvicorn

from api.app import create_app
from config import get_settings

logger = logging.getLogger("colorapi.error")

app = create_app()


def run() -> None:
    """Validate configuration, then serve the app until SIGTERM/SIGINT.

    Exits with status 1 before binding the listener if the database
    configuration is incomplete.
    """
    try:
        settings = get_settings()
    except ValueError as e:
        logger.error("invalid configuration", extra={"error": {"message": str(e)}})
        sys.exit(1)

    # log_config=None keeps the JSON logging installed by create_app()
    uvicorn.run(app, host=settings.api.host, port=settings.api.port, log_config=None)


if __name__ == "__main__":
    run()
