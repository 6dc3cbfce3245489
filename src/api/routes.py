"""FastAPI HTTP routes for the Color API.

This module defines the color endpoints. It handles:
- Query/path/body parsing and validation
- Response formatting (plain text vs JSON)
- Dependency injection of the color repository

## Endpoints

- `GET /api?colorKey=<key>[&format=json]`: Value of one color, as plain text
  or as a JSON color object
- `GET /api/color`: All colors
- `GET /api/color/{key}`: One color
- `POST /api/color/{key}`: Create or replace a color (`{"value": "..."}`)
- `DELETE /api/color/{key}`: Delete a color

## Error Handling

Route handlers raise `ColorAPIError` subclasses; the exception handlers
registered in `api.app` translate them:
- `BadRequestError` → 400 (Bad Request)
- `NotFoundError` → 404 (Not Found)
- `DatabaseConnectionError`, `ColorAPIError` → 500 (Internal Server Error)
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from api import models
from api.dependencies import ColorRepositoryDep
from core.exceptions import BadRequestError

router = APIRouter(prefix="/api", tags=["colors"])

_ERROR_RESPONSES = {
    400: {"model": models.ErrorResponse, "description": "Missing or malformed input"},
    404: {"model": models.ErrorResponse, "description": "Color not found"},
    500: {"model": models.ErrorResponse, "description": "Database failure"},
}


@router.get(
    "",
    response_class=PlainTextResponse,
    responses={
        200: {
            "content": {"application/json": {"schema": models.ColorResponse.model_json_schema()}},
            "description": "Color value as text, or the color as JSON when `format=json`",
        },
        **_ERROR_RESPONSES,
    },
)
async def get_color_value(
    repository: ColorRepositoryDep,
    color_key: Annotated[str | None, Query(alias="colorKey", description="Key of the color")] = None,
    response_format: Annotated[
        str | None,
        Query(alias="format", description="`json` for a JSON color object, `text` (default) for the bare value"),
    ] = None,
) -> Response:
    """Look up one color by query parameter.

    Example Request:
        ```
        GET /api?colorKey=primary
        GET /api?colorKey=primary&format=json
        ```

    Example Response:
        ```
        blue
        ```
        or, with `format=json`:
        ```json
        {"key": "primary", "value": "blue"}
        ```

    Raises:
        BadRequestError: If `colorKey` is missing or blank, or `format` is
            neither `json` nor `text`.
        NotFoundError: If the color does not exist.
    """
    if color_key is None or not color_key.strip():
        raise BadRequestError("Query parameter 'colorKey' is required")

    fmt = (response_format or "text").lower()
    if fmt not in ("json", "text"):
        msg = f"Unsupported format '{response_format}'. Must be 'json' or 'text'"
        raise BadRequestError(msg)

    color = await repository.get_by_key_async(color_key)
    if fmt == "json":
        return JSONResponse(content=models.ColorResponse.from_color(color).model_dump())
    return PlainTextResponse(content=color.value)


@router.get("/color", response_model=list[models.ColorResponse], responses={500: _ERROR_RESPONSES[500]})
async def list_colors(repository: ColorRepositoryDep) -> list[models.ColorResponse]:
    """Return every stored color.

    Example Response:
        ```json
        [{"key": "primary", "value": "blue"}, {"key": "secondary", "value": "gray"}]
        ```
    """
    colors = await repository.get_all_async()
    return [models.ColorResponse.from_color(color) for color in colors]


@router.get("/color/{key}", response_model=models.ColorResponse, responses=_ERROR_RESPONSES)
async def get_color(key: str, repository: ColorRepositoryDep) -> models.ColorResponse:
    """Return one color.

    Raises:
        NotFoundError: If the color does not exist.
    """
    color = await repository.get_by_key_async(key)
    return models.ColorResponse.from_color(color)


@router.post(
    "/color/{key}",
    response_model=models.ColorResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
)
async def upsert_color(
    key: str,
    req: models.ColorValueRequest,
    repository: ColorRepositoryDep,
) -> models.ColorResponse:
    """Create a color, or replace its value if it already exists.

    Repeating the same request leaves the same state as sending it once.

    Example Request:
        ```json
        POST /api/color/primary
        {"value": "blue"}
        ```

    Example Response (201):
        ```json
        {"key": "primary", "value": "blue"}
        ```
    """
    color = await repository.upsert_async(key, req.value)
    return models.ColorResponse.from_color(color)


@router.delete("/color/{key}", status_code=204, response_class=Response, responses=_ERROR_RESPONSES)
async def delete_color(key: str, repository: ColorRepositoryDep) -> Response:
    """Delete a color. Responds 204 with an empty body.

    Raises:
        NotFoundError: If the color does not exist.
    """
    await repository.delete_async(key)
    return Response(status_code=204)
