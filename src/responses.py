from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.errors import RegistryError


class ApiResponse(BaseModel):
    """Envelope returned by every mutating endpoint."""

    success: bool
    message: str
    data: dict[str, Any] | None = None


def error_response(error: RegistryError) -> JSONResponse:
    """Render a business error as a failed ApiResponse."""
    return JSONResponse(
        status_code=error.status_code,
        content=ApiResponse(success=False, message=error.message).model_dump(),
    )


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ApiResponse, "description": "Not found"},
    409: {"model": ApiResponse, "description": "Conflict with the current state"},
}

CREDENTIAL_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    **ERROR_RESPONSES,
    403: {"model": ApiResponse, "description": "Invalid reservation code"},
}
