"""Classroom ("sali") validation endpoints."""

from fastapi import APIRouter, Depends, status

from app.schemas.classroom import ClassroomRecord, ClassroomRequest
from app.schemas.error import ErrorResponse
from app.services import classroom as classroom_service
from app.services.messages import ValidationMessages, get_messages

router = APIRouter(tags=["classrooms"])


@router.post(
    "/sali/validate",
    summary="Validate a classroom",
    description="""Validate a classroom submission and return the normalized record.

**The request contains (application/json):**
- `nume`: Classroom name (required)
- `capacitate`: Seat capacity, non-negative integer as string or number (optional, defaults to 0)
- `cladire`: Building (optional)

**The response contains:**
- `name`, `capacity` (integer), `building`

All violated rules are reported together in a single 422 response.
""",
    operation_id="validateClassroom",
    response_model=ClassroomRecord,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        "422": {
            "model": ErrorResponse,
            "description": "Validation Error - one entry per violated field rule",
        },
    },
)
async def validate_classroom(
    payload: ClassroomRequest,
    messages: ValidationMessages = Depends(get_messages),
) -> ClassroomRecord:
    """Validate a classroom submission."""
    result = classroom_service.validate_classroom(payload.to_form(), messages)
    return result.raise_for_errors(messages.validation_error)
