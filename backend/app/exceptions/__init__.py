"""Custom exceptions for the Orar application."""

from .base import OrarError
from .business import ApplicationValidationError
from .validation import FormValidationError

__all__ = [
    "ApplicationValidationError",
    "FormValidationError",
    "OrarError",
]
