"""User-facing validation messages.

Defaults are the Romanian strings shown by the timetable forms. A caller
that needs other wording passes its own ``ValidationMessages`` instance
to the validators.
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict


class ValidationMessages(BaseModel):
    """Message catalog for the form validators."""

    model_config = ConfigDict(frozen=True)

    validation_error: str = "Eroare de validare"

    classroom_name_required: str = "Numele sălii este obligatoriu"
    classroom_capacity_positive: str = "Capacitatea trebuie să fie pozitivă"
    classroom_capacity_integer: str = "Capacitatea trebuie să fie un număr întreg"

    learning_cycle_required: str = "Numele ciclului de invatamant este obligatoriu"

    academic_year_start_invalid: str = "Anul de început trebuie să fie valid"
    academic_year_end_invalid: str = "Anul de sfârșit trebuie să fie valid"


@lru_cache
def get_messages() -> ValidationMessages:
    """Get cached default message catalog."""
    return ValidationMessages()
