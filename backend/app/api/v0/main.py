"""API v0 sub-application implementation."""

import json

from fastapi import FastAPI
from fastapi.responses import Response

from app.api.common.openapi import create_custom_openapi
from app.config import settings

# Create sub-application (v0)
app_v0 = FastAPI(
    title="Orar",
    description="Backend of the Orar academic timetable application.\n\n- Status (liveness) check\n\n- Validation of classroom, learning cycle and academic year submissions",
    version=f"{settings.APP_VERSION} ({settings.DTAP}-{settings.IMAGE_TAG})",
    root_path="/api/v0",
    responses={
        500: {
            "description": "Internal Server Error - an unexpected issue occurred that prevented the request from being completed"
        },
    },
)

# Override openapi method to apply custom modifications (alphabetical sorting)
app_v0.openapi = create_custom_openapi(app_v0)

# Register exception handlers for app_v0
# This is needed for tests that use app_v0 directly
from app.api.common.exception_handlers import register_exception_handlers

register_exception_handlers(app_v0)

# Register routers from common
from app.api.common.routers import (
    academic_years,
    classrooms,
    learning_types,
    status,
)

# Sort alphabetically
app_v0.include_router(academic_years.router, prefix="")
app_v0.include_router(classrooms.router, prefix="")
app_v0.include_router(learning_types.router, prefix="")
app_v0.include_router(status.router, prefix="")


# Custom OpenAPI endpoint with pretty-printed JSON
@app_v0.get("/openapi.json", include_in_schema=False)
async def get_openapi_json():
    """Return the OpenAPI schema as pretty-printed JSON."""
    return Response(
        content=json.dumps(app_v0.openapi(), indent=2, ensure_ascii=False),
        media_type="application/json",
    )


__all__ = ["app_v0"]
