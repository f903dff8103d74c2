"""Pydantic schemas for AcademicYear ("an universitar") validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "MIN_ACADEMIC_YEAR",
    "AcademicYearRecord",
    "AcademicYearRequest",
]

MIN_ACADEMIC_YEAR = 2000


class AcademicYearRequest(BaseModel):
    """Academic year payload as sent by API clients."""

    model_config = ConfigDict(title="academic_year.AcademicYearRequest")

    an_inceput: Any = Field(
        None, alias="anInceput", description="Start year", examples=[2024]
    )
    an_sfarsit: Any = Field(
        None, alias="anSfarsit", description="End year", examples=[2025]
    )

    def to_form(self) -> dict[str, Any]:
        return {"start": self.an_inceput, "end": self.an_sfarsit}


class AcademicYearRecord(BaseModel):
    """Normalized academic year record.

    No ordering between ``start`` and ``end`` is enforced.
    """

    model_config = ConfigDict(title="academic_year.AcademicYearRecord", frozen=True)

    start: int = Field(..., ge=MIN_ACADEMIC_YEAR, description="Start year")
    end: int = Field(..., ge=MIN_ACADEMIC_YEAR, description="End year")

    @property
    def period(self) -> str:
        """Display period, e.g. '2024-2025'."""
        return f"{self.start}-{self.end}"
