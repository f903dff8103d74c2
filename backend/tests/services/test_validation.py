"""Tests for the shared validation result and form helpers"""

import pytest
from app.exceptions import FormValidationError
from app.schemas.classroom import ClassroomRecord
from app.schemas.validation import FieldError, ValidationResult
from app.services.validation import FieldErrorCollector, is_blank, parse_int
from pydantic import ValidationError

NAME_ERROR = FieldError(field="name", message="Numele sălii este obligatoriu")


class TestValidationResult:
    """Test suite for ValidationResult"""

    def test_record_only(self):
        """Test a result holding only a record is ok and returns it"""
        record = ClassroomRecord(name="Lab 1")

        result = ValidationResult[ClassroomRecord](record=record)

        assert result.ok
        assert result.raise_for_errors("Eroare de validare") == record

    def test_errors_only(self):
        """Test a result holding only errors raises them together"""
        result = ValidationResult[ClassroomRecord](errors=[NAME_ERROR])

        assert not result.ok
        with pytest.raises(FormValidationError) as exc_info:
            result.raise_for_errors("Eroare de validare")
        assert exc_info.value.errors == [NAME_ERROR]

    def test_neither_record_nor_errors_rejected(self):
        """Test an empty result cannot be built"""
        with pytest.raises(ValidationError):
            ValidationResult[ClassroomRecord]()

    def test_record_and_errors_rejected(self):
        """Test a result cannot hold a record and errors at once"""
        with pytest.raises(ValidationError):
            ValidationResult[ClassroomRecord](
                record=ClassroomRecord(name="Lab 1"), errors=[NAME_ERROR]
            )


class TestFormHelpers:
    """Test suite for the form parsing helpers"""

    def test_collector_keeps_insertion_order(self):
        """Test collected errors come back in the order they were added"""
        errors = FieldErrorCollector()
        assert not errors

        errors.add("name", "first")
        errors.add("capacity", "second")

        assert errors
        assert [e.field for e in errors.errors] == ["name", "capacity"]

    @pytest.mark.parametrize("value", [None, ""])
    def test_is_blank(self, value):
        """Test None and the empty string are blank"""
        assert is_blank(value)

    @pytest.mark.parametrize("value", [" ", "0", 0, False])
    def test_is_not_blank(self, value):
        """Test whitespace, zero and False are not blank"""
        assert not is_blank(value)

    @pytest.mark.parametrize(
        "value,expected", [("30", 30), (" 12 ", 12), ("-5", -5), ("+7", 7), (42, 42)]
    )
    def test_parse_int(self, value, expected):
        """Test integer text and ints are parsed"""
        assert parse_int(value) == expected

    @pytest.mark.parametrize(
        "value", ["12abc", "1.5", "", "abc", True, 1.0, [1], None]
    )
    def test_parse_int_rejects(self, value):
        """Test partial numbers, floats, bools and other types are rejected"""
        assert parse_int(value) is None
