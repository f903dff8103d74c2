"""Learning type ("cicluri") validation endpoints."""

from fastapi import APIRouter, Depends, status

from app.schemas.error import ErrorResponse
from app.schemas.learning_type import LearningTypeRecord, LearningTypeRequest
from app.services import learning_type as learning_type_service
from app.services.messages import ValidationMessages, get_messages

router = APIRouter(tags=["learning-types"])


@router.post(
    "/cicluri/validate",
    summary="Validate a learning cycle",
    description="Validate that `nume` is one of the learning cycles `Licenta` or `Master`.",
    operation_id="validateLearningType",
    response_model=LearningTypeRecord,
    status_code=status.HTTP_200_OK,
    responses={
        "422": {
            "model": ErrorResponse,
            "description": "Validation Error - unknown or missing learning cycle",
        },
    },
)
async def validate_learning_type(
    payload: LearningTypeRequest,
    messages: ValidationMessages = Depends(get_messages),
) -> LearningTypeRecord:
    result = learning_type_service.validate_learning_type(payload.to_form(), messages)
    return result.raise_for_errors(messages.validation_error)
