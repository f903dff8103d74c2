"""Classroom form validator."""

import logging

from app.schemas.classroom import ClassroomRecord
from app.schemas.validation import ValidationResult
from app.services.messages import ValidationMessages, get_messages
from app.services.validation import FieldErrorCollector, FormRecord, is_blank, parse_int

logger = logging.getLogger(__name__)


def validate_classroom(
    data: FormRecord, messages: ValidationMessages | None = None
) -> ValidationResult[ClassroomRecord]:
    """
    Validate a classroom form record.

    Rules:
    - name: required, non-empty
    - capacity: optional, defaults to 0; otherwise a base-10 integer >= 0
    - building: optional, passed through unchanged

    Args:
        data: Raw form record (text values keyed by field name)
        messages: Message catalog (defaults to the Romanian catalog)

    Returns:
        ValidationResult holding either the ClassroomRecord or every field error
    """
    messages = messages or get_messages()
    errors = FieldErrorCollector()

    name = data.get("name")
    if is_blank(name) or not isinstance(name, str):
        errors.add("name", messages.classroom_name_required)

    raw_capacity = data.get("capacity")
    capacity: int | None = 0
    if not is_blank(raw_capacity):
        capacity = parse_int(raw_capacity)
        if capacity is None:
            errors.add("capacity", messages.classroom_capacity_integer)
        elif capacity < 0:
            errors.add("capacity", messages.classroom_capacity_positive)

    building = data.get("building")
    if building is not None and not isinstance(building, str):
        building = str(building)

    if errors:
        logger.warning(
            f"Classroom validation failed on fields: {[e.field for e in errors.errors]}"
        )
        return ValidationResult[ClassroomRecord](errors=errors.errors)

    return ValidationResult[ClassroomRecord](
        record=ClassroomRecord(name=name, capacity=capacity, building=building)
    )
