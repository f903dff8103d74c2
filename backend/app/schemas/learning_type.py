"""Pydantic schemas for LearningType ("ciclu de invatamant") validation."""

from __future__ import annotations

from enum import Enum

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "LearningCycle",
    "LearningTypeRecord",
    "LearningTypeRequest",
]


class LearningCycle(str, Enum):
    """Closed set of learning cycles."""

    LICENTA = "Licenta"
    MASTER = "Master"


class LearningTypeRequest(BaseModel):
    """Learning type payload as sent by API clients."""

    model_config = ConfigDict(title="learning_type.LearningTypeRequest")

    nume: Any = Field(
        None, description="Learning cycle name", examples=["Licenta"]
    )

    def to_form(self) -> dict[str, Any]:
        return {"learningCycle": self.nume}


class LearningTypeRecord(BaseModel):
    """Normalized learning type record."""

    model_config = ConfigDict(
        title="learning_type.LearningTypeRecord",
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    learning_cycle: LearningCycle = Field(
        ...,
        alias="learningCycle",
        description="Learning cycle (Licenta or Master)",
        examples=["Licenta"],
    )
