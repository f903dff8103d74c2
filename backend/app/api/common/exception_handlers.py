"""Centralized exception handler registration for FastAPI apps."""

from typing import TYPE_CHECKING, cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

if TYPE_CHECKING:
    from starlette.types import ExceptionHandler

from app.exceptions import ApplicationValidationError, FormValidationError
from app.exceptions.handlers import (
    business_logic_exception_handler,
    form_validation_exception_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers for the application.

    Order matters: more specific handlers should be registered before general ones.

    Args:
        app: FastAPI application instance
    """
    # Starlette's base class also covers routing 404/405 raised outside FastAPI routes
    app.add_exception_handler(
        StarletteHTTPException, cast("ExceptionHandler", http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(
        FormValidationError,
        cast("ExceptionHandler", form_validation_exception_handler),
    )
    app.add_exception_handler(
        ApplicationValidationError,
        cast("ExceptionHandler", business_logic_exception_handler),
    )
    app.add_exception_handler(
        Exception, cast("ExceptionHandler", general_exception_handler)
    )


__all__ = ["register_exception_handlers"]
