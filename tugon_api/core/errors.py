"""
Service exceptions and error handling.

Defines custom exceptions and error handlers for consistent error responses.
Every error leaves the service as ``{"error": {"type", "message", ...}}``.
"""

from typing import Any, Dict, Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging import get_logger

logger = get_logger(__name__)


# Custom Exceptions

class TugonError(Exception):
    """Base exception for service errors"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(TugonError):
    """Raised for input that is well-formed JSON but unusable"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details
        )


class FeedbackError(TugonError):
    """Raised when feedback could not be computed"""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to compute feedback: {error}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"error": error}
        )


# Error Responses

def create_error_response(
    error: Exception,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    include_details: bool = True
) -> JSONResponse:
    """Create standardized error response"""

    error_data = {
        "error": {
            "type": error.__class__.__name__,
            "message": str(error),
        }
    }

    if isinstance(error, TugonError) and include_details:
        error_data["error"]["details"] = error.details

    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Error occurred: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            "status_code": status_code,
            **(error.details if isinstance(error, TugonError) else {})
        },
        exc_info=status_code >= 500
    )

    return JSONResponse(
        status_code=status_code,
        content=error_data
    )


# Exception Handlers

async def tugon_error_handler(request: Request, exc: TugonError) -> JSONResponse:
    """Handle TugonError exceptions"""
    return create_error_response(exc, exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTPException exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "type": "HTTPException",
                "message": exc.detail,
            }
        }
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    errors = jsonable_encoder(exc.errors())
    logger.warning(
        "Validation error",
        extra_data={"errors": errors, "path": request.url.path}
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "type": "ValidationError",
                "message": "Request validation failed",
                "details": errors
            }
        }
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors"""
    logger.exception(
        "Unexpected error occurred",
        extra_data={"path": request.url.path}
    )

    # Don't expose internal errors in production
    from .config import settings
    include_details = settings.DEBUG

    message = str(exc) if include_details else "An internal error occurred"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "type": "InternalServerError",
                "message": message,
            }
        }
    )


def register_error_handlers(app):
    """Register error handlers with FastAPI app"""
    app.add_exception_handler(TugonError, tugon_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)
