"""Error response helpers shared by exception handlers and middleware."""

from http import HTTPStatus

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body used for every 4xx/5xx response.

    Args:
        status_code: HTTP status code.
        message: Human-readable detail.

    Returns:
        `{"error": <reason phrase>, "message": <message>}` with the given status.
    """
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return JSONResponse(status_code=status_code, content={"error": phrase, "message": message})
