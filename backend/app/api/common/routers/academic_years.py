"""Academic year ("ani universitari") validation endpoints."""

from fastapi import APIRouter, Depends, status

from app.schemas.academic_year import AcademicYearRecord, AcademicYearRequest
from app.schemas.error import ErrorResponse
from app.services import academic_year as academic_year_service
from app.services.messages import ValidationMessages, get_messages

router = APIRouter(tags=["academic-years"])


@router.post(
    "/ani-universitari/validate",
    summary="Validate an academic year",
    description="""Validate an academic year submission.

**The request contains (application/json):**
- `anInceput`: Start year (>= 2000)
- `anSfarsit`: End year (>= 2000)

Each year is checked on its own; no ordering between start and end is enforced.
""",
    operation_id="validateAcademicYear",
    response_model=AcademicYearRecord,
    status_code=status.HTTP_200_OK,
    responses={
        "422": {
            "model": ErrorResponse,
            "description": "Validation Error - one entry per invalid year",
        },
    },
)
async def validate_academic_year(
    payload: AcademicYearRequest,
    messages: ValidationMessages = Depends(get_messages),
) -> AcademicYearRecord:
    """Validate an academic year submission."""
    result = academic_year_service.validate_academic_year(payload.to_form(), messages)
    return result.raise_for_errors(messages.validation_error)
