"""Status endpoint"""

import logging

from fastapi import APIRouter, Depends, status

from app.config import Settings, get_settings
from app.schemas.status import StatusReport
from app.services import status as status_service
from app.services.status import ProcessStart, get_process_start

logger = logging.getLogger(__name__)

router = APIRouter(tags=["status"])


@router.get(
    "/status",
    response_model=StatusReport,
    status_code=status.HTTP_200_OK,
    summary="Status of the API (public)",
    description="Liveness check returning status, version, uptime and current timestamp",
    operation_id="status",
    responses={
        200: {
            "description": "API is online",
            "content": {
                "application/json": {
                    "example": {
                        "status": "online",
                        "version": "1.0.0",
                        "uptime": "3600s",
                        "timestamp": "2024-01-15T10:30:00.000Z",
                    }
                }
            },
        },
    },
)
async def get_status(
    process_start: ProcessStart = Depends(get_process_start),
    settings: Settings = Depends(get_settings),
) -> StatusReport:
    """Liveness check (no authentication required)"""
    logger.debug("Status endpoint called")
    return status_service.get_status(process_start, version=settings.APP_VERSION)
