"""Validation exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .business import ApplicationValidationError

if TYPE_CHECKING:
    from app.schemas.validation import FieldError


class FormValidationError(ApplicationValidationError):
    """Raised when a submitted form record fails one or more field rules.

    Validators never raise this themselves; they return their errors as
    data. The API layer raises it so the registered handler can render
    every collected field error in a single 422 response.
    """

    def __init__(self, message: str, errors: list[FieldError]) -> None:
        super().__init__(
            message, details={"fields": [error.field for error in errors]}
        )
        self.errors = list(errors)
