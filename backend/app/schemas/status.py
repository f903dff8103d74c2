"""Pydantic schemas for the status endpoint."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StatusReport(BaseModel):
    """Status response schema"""

    model_config = ConfigDict(title="status.StatusReport")

    status: Literal["online"] = Field(
        "online", description="Service status (always 'online' if responding)"
    )
    version: str = Field(..., description="API version", examples=["1.0.0"])
    uptime: str = Field(
        ...,
        pattern=r"^[0-9]+s$",
        description="Seconds since process start, suffixed with 's'",
        examples=["3600s"],
    )
    timestamp: str = Field(
        ...,
        description="Current time (ISO-8601, UTC)",
        examples=["2024-01-15T10:30:00.000Z"],
    )
