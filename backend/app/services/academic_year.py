"""AcademicYear form validator."""

import logging

from app.schemas.academic_year import MIN_ACADEMIC_YEAR, AcademicYearRecord
from app.schemas.validation import ValidationResult
from app.services.messages import ValidationMessages, get_messages
from app.services.validation import FieldErrorCollector, FormRecord, parse_int

logger = logging.getLogger(__name__)


def _parse_year(
    data: FormRecord, field: str, message: str, errors: FieldErrorCollector
) -> int | None:
    year = parse_int(data.get(field))
    if year is None or year < MIN_ACADEMIC_YEAR:
        errors.add(field, message)
        return None
    return year


def validate_academic_year(
    data: FormRecord, messages: ValidationMessages | None = None
) -> ValidationResult[AcademicYearRecord]:
    """
    Validate an academic year form record.

    Both ``start`` and ``end`` must parse as base-10 integers >= 2000.
    Each field is checked on its own; ``end`` before ``start`` is accepted.
    """
    messages = messages or get_messages()
    errors = FieldErrorCollector()

    start = _parse_year(data, "start", messages.academic_year_start_invalid, errors)
    end = _parse_year(data, "end", messages.academic_year_end_invalid, errors)

    if errors:
        logger.warning(
            f"AcademicYear validation failed on fields: {[e.field for e in errors.errors]}"
        )
        return ValidationResult[AcademicYearRecord](errors=errors.errors)

    return ValidationResult[AcademicYearRecord](
        record=AcademicYearRecord(start=start, end=end)
    )
