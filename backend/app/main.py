"""Orar backend entrypoint"""

import logging

from fastapi import FastAPI

from app.api.common.exception_handlers import register_exception_handlers
from app.api.common_app import app_common
from app.api.v0 import app_v0
from app.config import settings
from app.security import SecurityHeadersMiddleware
from app.services.status import get_process_start

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Capture the process start once, before the first request is served
process_start = get_process_start()

# Create FastAPI application instance
app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================
register_exception_handlers(app)

# ============================================================================
# MIDDLEWARE
# ============================================================================
# CSP Policy explanation:
# - default-src 'self': Only load resources from same origin
# - script-src: Allow same-origin scripts + inline + CDN for Swagger UI
# - style-src: Allow same-origin styles + inline + CDN for Swagger UI
# - img-src 'self' data:: Allow images from same origin and data URIs
# - font-src: Allow fonts from CDN (for Swagger UI)
# - connect-src 'self': Allow API calls to same origin
# - frame-ancestors 'none': Prevent framing (clickjacking protection)
# - base-uri 'self': Restrict <base> tag URLs
# - object-src 'none': Block <object>, <embed>, <applet>
# - form-action 'self': Restrict form submission targets
app.add_middleware(
    SecurityHeadersMiddleware,
    enable_csp=settings.ENABLE_CSP,
    csp_policy=(
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
        "img-src 'self' data:; "
        "font-src 'self' https://cdn.jsdelivr.net; "
        "connect-src 'self'; "
        "frame-ancestors 'none'; "
        "base-uri 'self'; "
        "object-src 'none'; "
        "form-action 'self'"
    ),
    enable_hsts=settings.ENABLE_HSTS,
)

# ============================================================================
# MOUNT SUB-APPLICATIONS
# ============================================================================

# Mount versioned sub-applications first (more specific paths)
app.mount("/api/v0", app_v0)

# Mount version-independent sub-application last (broader path)
app.mount("/api", app_common)


@app.get("/")
async def root():
    return "OK"


logger.info(
    f"{settings.APP_NAME} {settings.APP_VERSION} started at {process_start.started_at.isoformat()}"
)
