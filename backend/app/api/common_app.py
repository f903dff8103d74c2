"""Version-independent API endpoints."""

from fastapi import FastAPI

from app.config import settings

# Create version-independent sub-application
app_common = FastAPI(
    title="Orar - Common",
    description="Version-independent endpoints for status monitoring.",
    version=settings.APP_VERSION,
    root_path="/api",
)

# Register exception handlers for consistent error responses
from app.api.common.exception_handlers import register_exception_handlers  # noqa: E402

register_exception_handlers(app_common)

# Register status router
from app.api.common.routers import status  # noqa: E402

app_common.include_router(status.router)

__all__ = ["app_common"]
