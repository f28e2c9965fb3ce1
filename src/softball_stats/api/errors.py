"""
Unified error handling for consistent API error responses.

All API errors use this response format:
{
    "error": {
        "code": "ERROR_CODE",
        "message": "Human-readable message",
        "detail": "Optional additional context"
    }
}
"""

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from ..providers.base import InvalidCategory, UpstreamTransportError


class APIError(HTTPException):
    """Base API error class for consistent error responses."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.code = code
        self.message = message
        self.error_detail = detail
        super().__init__(
            status_code=status_code,
            detail={"code": code, "message": message, "detail": detail},
            headers=headers,
        )


class InvalidCategoryError(APIError):
    """Unknown stat category (400)."""

    def __init__(self, category: str, valid: list[str]):
        super().__init__(
            status_code=400,
            code="INVALID_CATEGORY",
            message=f"Invalid category: {category}",
            detail=f"Expected one of: {', '.join(valid)}",
        )


class ExternalServiceError(APIError):
    """Upstream API error (502)."""

    def __init__(self, service: str, message: str, status_code: int = 502):
        super().__init__(
            status_code=status_code,
            code="EXTERNAL_API_ERROR",
            message=message,
            detail=f"Error from {service} API",
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    FastAPI exception handler for APIError.

    Converts APIError exceptions to consistent JSON responses.
    """
    content = {
        "error": {
            "code": exc.code,
            "message": exc.message,
        }
    }
    if exc.error_detail:
        content["error"]["detail"] = exc.error_detail

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
    )


async def invalid_category_handler(request: Request, exc: InvalidCategory) -> JSONResponse:
    """Map InvalidCategory raised by the service layer to a 400 response."""
    from ..core.types import CATEGORY_REGISTRY

    valid = [category.value for category in CATEGORY_REGISTRY]
    return await api_error_handler(request, InvalidCategoryError(exc.category, valid))


async def upstream_error_handler(request: Request, exc: UpstreamTransportError) -> JSONResponse:
    """Map UpstreamTransportError raised by the service layer to a 502 response."""
    return await api_error_handler(request, ExternalServiceError("NCAA", str(exc)))
