"""Validation result schemas shared by the form validators."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.exceptions import FormValidationError

RecordT = TypeVar("RecordT", bound=BaseModel)


class FieldError(BaseModel):
    """A validation failure tied to one named input field."""

    model_config = ConfigDict(title="validation.FieldError", frozen=True)

    field: str = Field(..., description="Input field name", examples=["capacity"])
    message: str = Field(
        ...,
        description="Human-readable (localized) error message",
        examples=["Capacitatea trebuie să fie pozitivă"],
    )


class ValidationResult(BaseModel, Generic[RecordT]):
    """Outcome of validating one form record.

    Exactly one of the two holds:
    - ``record`` is set and ``errors`` is empty
    - ``record`` is None and ``errors`` lists every violated rule
    """

    model_config = ConfigDict(title="validation.ValidationResult", frozen=True)

    record: RecordT | None = None
    errors: list[FieldError] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_record_or_errors(self) -> ValidationResult[RecordT]:
        if (self.record is None) != bool(self.errors):
            raise ValueError("a result holds either a record or field errors, not both")
        return self

    @property
    def ok(self) -> bool:
        return not self.errors

    def field_errors(self) -> dict[str, list[str]]:
        """Group error messages by field name, preserving rule order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def raise_for_errors(self, message: str) -> RecordT:
        """Return the record, or raise FormValidationError with all field errors."""
        if self.record is None:
            raise FormValidationError(message, self.errors)
        return self.record
