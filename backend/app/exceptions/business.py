"""Business logic exceptions."""

from .base import OrarError


class ApplicationValidationError(OrarError):
    """Raised when business logic validation fails."""

    pass
