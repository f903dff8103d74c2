"""Pydantic schemas for Classroom ("sala") validation requests and records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ClassroomRecord",
    "ClassroomRequest",
]


class ClassroomRequest(BaseModel):
    """Classroom payload as sent by API clients.

    Field names follow the public REST API (Romanian). Values are left
    untyped: coercion and rule checks happen in the classroom validator
    so that every violation is reported together, with catalog messages.
    """

    model_config = ConfigDict(title="classroom.ClassroomRequest")

    nume: Any = Field(
        None, description="Classroom name (required)", examples=["Lab 1"]
    )
    capacitate: Any = Field(
        None,
        description="Seat capacity, non-negative integer (defaults to 0)",
        examples=["30"],
    )
    cladire: Any = Field(
        None, description="Building (optional)", examples=["B"]
    )

    def to_form(self) -> dict[str, Any]:
        """Map the API payload onto the classroom form record."""
        return {
            "name": self.nume,
            "building": self.cladire,
            "capacity": self.capacitate,
        }


class ClassroomRecord(BaseModel):
    """Normalized classroom record."""

    model_config = ConfigDict(title="classroom.ClassroomRecord", frozen=True)

    name: str = Field(..., min_length=1, description="Classroom name")
    capacity: int = Field(0, ge=0, description="Seat capacity")
    building: str | None = Field(None, description="Building (optional)")
