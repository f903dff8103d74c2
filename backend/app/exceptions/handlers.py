"""Global exception handlers for consistent error responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.schemas.error import ErrorDetail, ErrorResponse

if TYPE_CHECKING:
    from fastapi.exceptions import RequestValidationError
    from pydantic import ValidationError as PydanticValidationError

    from app.exceptions.business import ApplicationValidationError
    from app.exceptions.validation import FormValidationError


def _get_logger():
    """Lazy import logger to avoid circular dependencies."""
    import logging

    return logging.getLogger(__name__)


def _error_response(
    request: Request, status_code: int, details: list[ErrorDetail]
) -> JSONResponse:
    error_response = ErrorResponse(
        detail=details,
        path=request.url.path,
        status_code=status_code,
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(mode="json", exclude_none=True),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError | PydanticValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Returns 400 Bad Request for GET requests (query parameter validation),
    Returns 422 Unprocessable Entity for other methods (request body validation).
    """
    logger = _get_logger()
    logger.warning(f"Validation error on {request.url.path}: {exc}")

    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append(
            ErrorDetail(
                msg=error["msg"],
                type=error["type"],
                field=".".join(loc) or None,
            )
        )

    # Use 400 for GET requests (query param validation), 422 for others (body validation)
    status_code = (
        status.HTTP_400_BAD_REQUEST
        if request.method == "GET"
        else status.HTTP_422_UNPROCESSABLE_CONTENT
    )

    return _error_response(request, status_code, details)


async def form_validation_exception_handler(
    request: Request, exc: FormValidationError
) -> JSONResponse:
    """Handle form validation errors: one detail entry per violated field rule."""
    logger = _get_logger()
    logger.warning(
        f"Form validation error on {request.url.path}: fields={exc.details.get('fields')}"
    )

    details = [
        ErrorDetail(msg=error.message, type="validation_error", field=error.field)
        for error in exc.errors
    ]
    return _error_response(request, status.HTTP_422_UNPROCESSABLE_CONTENT, details)


async def business_logic_exception_handler(
    request: Request, exc: ApplicationValidationError
) -> JSONResponse:
    """Handle business logic errors."""
    logger = _get_logger()
    logger.warning(f"Business logic error on {request.url.path}: {exc}")

    return _error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        [ErrorDetail(msg=str(exc), type="business_logic_error")],
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with proper formatting."""
    logger = _get_logger()

    # Determine the error type based on status code
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error_type = "not_found_error"
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error_type = "method_not_allowed"
    elif 400 <= exc.status_code < 500:
        error_type = "validation_error"
    else:
        error_type = "server_error"

    logger.warning(
        f"HTTP exception on {request.url.path}: {exc.detail} (status: {exc.status_code})"
    )

    response = _error_response(
        request,
        exc.status_code,
        [ErrorDetail(msg=str(exc.detail), type=error_type)],
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions.

    This is the catch-all handler that prevents stack traces from leaking to clients.
    The full exception details are logged server-side for debugging.
    """
    logger = _get_logger()

    # Log full stack trace server-side for debugging
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        [
            ErrorDetail(
                msg="An internal server error occurred",
                type="internal_error",
            )
        ],
    )
