"""Shared helpers for the two-stage form validators.

Stage 1 parses every field on its own and records failures in a
``FieldErrorCollector``. Stage 2 builds the typed record only when the
collector is empty. Nothing here raises on malformed input.
"""

import re
from collections.abc import Mapping
from typing import Any

from app.schemas.validation import FieldError

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")

FormRecord = Mapping[str, Any]


class FieldErrorCollector:
    """Accumulates field errors across all rules of one record."""

    def __init__(self) -> None:
        self._errors: list[FieldError] = []

    def add(self, field: str, message: str) -> None:
        self._errors.append(FieldError(field=field, message=message))

    @property
    def errors(self) -> list[FieldError]:
        return list(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)


def is_blank(value: Any) -> bool:
    """True for absent form values: None or the empty string."""
    return value is None or value == ""


def parse_int(value: Any) -> int | None:
    """Parse a form value as a base-10 integer.

    Accepts ints (not bools) and strings made of an optional sign and
    digits, with surrounding whitespace. Returns None when the value is
    not an integer; partial parses such as "12abc" are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _INTEGER_PATTERN.match(text):
        return None
    return int(text, 10)
