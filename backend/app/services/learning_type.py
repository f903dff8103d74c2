"""LearningType form validator."""

import logging

from app.schemas.learning_type import LearningCycle, LearningTypeRecord
from app.schemas.validation import ValidationResult
from app.services.messages import ValidationMessages, get_messages
from app.services.validation import FieldErrorCollector, FormRecord

logger = logging.getLogger(__name__)

LEARNING_CYCLES = frozenset(cycle.value for cycle in LearningCycle)


def validate_learning_type(
    data: FormRecord, messages: ValidationMessages | None = None
) -> ValidationResult[LearningTypeRecord]:
    """Validate that ``learningCycle`` is exactly one of the known cycles."""
    messages = messages or get_messages()
    errors = FieldErrorCollector()

    value = data.get("learningCycle")
    if not isinstance(value, str) or value not in LEARNING_CYCLES:
        errors.add("learningCycle", messages.learning_cycle_required)

    if errors:
        logger.warning("LearningType validation failed on fields: ['learningCycle']")
        return ValidationResult[LearningTypeRecord](errors=errors.errors)

    return ValidationResult[LearningTypeRecord](
        record=LearningTypeRecord(learning_cycle=LearningCycle(value))
    )
