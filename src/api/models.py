"""Pydantic request/response models for the Color API.

## Request Models

- `ColorValueRequest`: Body of `POST /api/color/{key}`.

## Response Models

- `ColorResponse`: JSON representation of a color, shared by every endpoint
  that returns one (`/api?format=json` included).
- `ErrorResponse`: Body of every 4xx/5xx response.

## Validation

Pydantic validates request bodies at the router boundary:
- `value` is required and must be a non-empty string
- Unknown fields are rejected
Failures are answered with HTTP 400 by the app's validation handler.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.models import Color


class ColorValueRequest(BaseModel):
    """Request to create or replace the value of a color.

    Example:
        ```json
        {"value": "blue"}
        ```
    """

    model_config = ConfigDict(extra="forbid")

    value: str = Field(min_length=1, description="Color value, stored as an opaque string")


class ColorResponse(BaseModel):
    """A stored color.

    Example:
        ```json
        {"key": "primary", "value": "blue"}
        ```
    """

    key: str = Field(description="Unique color key")
    value: str = Field(description="Color value")

    @classmethod
    def from_color(cls, color: Color) -> ColorResponse:
        return cls(key=color.key, value=color.value)


class ErrorResponse(BaseModel):
    """Error body returned with every 4xx/5xx status.

    Example:
        ```json
        {"error": "Not Found", "message": "Color 'primary' not found"}
        ```
    """

    error: str = Field(description="HTTP reason phrase")
    message: str = Field(description="Human-readable error detail")
