"""Tests for the classroom validator"""

import pytest
from app.schemas.classroom import ClassroomRecord
from app.services.classroom import validate_classroom
from app.services.messages import ValidationMessages


class TestValidateClassroom:
    """Test suite for validate_classroom"""

    def test_valid_classroom(self):
        """Test a complete classroom is normalized with an integer capacity"""
        # Act
        result = validate_classroom({"name": "Lab 1", "capacity": "30", "building": "B"})

        # Assert
        assert result.ok
        assert result.errors == []
        assert result.record == ClassroomRecord(name="Lab 1", capacity=30, building="B")

    @pytest.mark.parametrize(
        "data",
        [
            {"name": "Lab 1"},
            {"name": "Lab 1", "capacity": ""},
            {"name": "Lab 1", "capacity": None},
        ],
    )
    def test_missing_capacity_defaults_to_zero(self, data):
        """Test omitted or empty capacity becomes 0"""
        result = validate_classroom(data)

        assert result.ok
        assert result.record.capacity == 0

    def test_building_is_optional(self):
        """Test building may be absent"""
        result = validate_classroom({"name": "Aula", "capacity": "120"})

        assert result.ok
        assert result.record.building is None

    def test_building_passed_through_unchanged(self):
        """Test building text is not altered"""
        result = validate_classroom({"name": "Aula", "building": "  Corp A "})

        assert result.record.building == "  Corp A "

    def test_negative_capacity_fails(self):
        """Test capacity -1 is rejected on the capacity field"""
        result = validate_classroom({"name": "Lab 1", "capacity": "-1"})

        assert not result.ok
        assert result.record is None
        assert [e.field for e in result.errors] == ["capacity"]
        assert result.errors[0].message == "Capacitatea trebuie să fie pozitivă"

    @pytest.mark.parametrize("capacity", ["abc", "12abc", "1.5", "   "])
    def test_non_integer_capacity_fails(self, capacity):
        """Test non-numeric capacity is invalid, not coerced to 0"""
        result = validate_classroom({"name": "Lab 1", "capacity": capacity})

        assert not result.ok
        assert result.field_errors() == {
            "capacity": ["Capacitatea trebuie să fie un număr întreg"]
        }

    def test_capacity_with_whitespace_and_int(self):
        """Test capacity accepts surrounding whitespace and plain ints"""
        assert validate_classroom({"name": "A", "capacity": " 12 "}).record.capacity == 12
        assert validate_classroom({"name": "A", "capacity": 30}).record.capacity == 30

    def test_capacity_bool_rejected(self):
        """Test booleans are not treated as integers"""
        result = validate_classroom({"name": "A", "capacity": True})

        assert [e.field for e in result.errors] == ["capacity"]

    @pytest.mark.parametrize(
        "data",
        [{"name": ""}, {}, {"name": None, "capacity": "10", "building": "C"}],
    )
    def test_empty_name_fails(self, data):
        """Test empty or missing name fails on name regardless of other fields"""
        result = validate_classroom(data)

        assert not result.ok
        assert "name" in result.field_errors()
        assert result.field_errors()["name"] == ["Numele sălii este obligatoriu"]

    def test_all_errors_are_collected(self):
        """Test empty name and invalid capacity are both reported"""
        result = validate_classroom({"name": "", "capacity": "abc"})

        assert not result.ok
        assert [e.field for e in result.errors] == ["name", "capacity"]

    def test_custom_messages(self):
        """Test messages come from the given catalog"""
        messages = ValidationMessages(classroom_name_required="Name is required")

        result = validate_classroom({"name": ""}, messages)

        assert result.errors[0].message == "Name is required"
