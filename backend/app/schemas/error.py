"""Error response schemas for consistent API error formatting."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """Detail of a single error."""

    model_config = ConfigDict(
        title="error.ErrorDetail",
        json_schema_extra={
            "example": {
                "msg": "Numele sălii este obligatoriu",
                "type": "validation_error",
                "field": "name",
            }
        },
    )

    msg: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Error type identifier")
    field: str | None = Field(
        None, description="Form field the error refers to (validation errors only)"
    )


class ErrorResponse(BaseModel):
    """Standardized error response format."""

    model_config = ConfigDict(
        title="error.ErrorResponse",
        json_schema_extra={
            "example": {
                "detail": [
                    {
                        "msg": "Capacitatea trebuie să fie pozitivă",
                        "type": "validation_error",
                        "field": "capacity",
                    }
                ],
                "timestamp": "2025-01-15T14:22:15Z",
                "path": "/api/v0/sali/validate",
                "status_code": 422,
            }
        },
    )

    detail: list[ErrorDetail] = Field(..., description="List of error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Timestamp when the error occurred",
    )
    path: str = Field(..., description="API path where the error occurred")
    status_code: int = Field(..., description="HTTP status code")
