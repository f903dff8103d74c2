"""Security headers middleware for FastAPI application."""

from collections.abc import Callable, Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

# Responses under these prefixes change on every call or echo submitted data
DEFAULT_NO_STORE_PATHS = (
    "/api/status",
    "/api/v0/status",
    "/api/v0/sali/",
    "/api/v0/cicluri/",
    "/api/v0/ani-universitari/",
    "/api/v0/openapi.json",
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add OWASP recommended security headers to all responses.

    Covers clickjacking (X-Frame-Options, CSP frame-ancestors), MIME-sniffing
    (X-Content-Type-Options), referrer leakage, cross-origin isolation
    (COOP, CORP, COEP), browser feature access (Permissions-Policy) and,
    optionally, XSS via Content-Security-Policy.
    """

    def __init__(
        self,
        app: ASGIApp,
        enable_hsts: bool = True,
        hsts_max_age: int = 31536000,
        enable_csp: bool = False,  # Disable by default if handled by Nginx
        csp_policy: str | None = None,
        no_store_paths: Iterable[str] = DEFAULT_NO_STORE_PATHS,
    ):
        """
        Initialize security headers middleware.

        Args:
            app: The ASGI application
            enable_hsts: Enable Strict-Transport-Security header
            hsts_max_age: Max age for HSTS in seconds (default: 1 year)
            enable_csp: Enable Content-Security-Policy (disable if Nginx handles it)
            csp_policy: Custom CSP policy string
            no_store_paths: Path prefixes whose responses must never be cached
        """
        super().__init__(app)
        self.enable_hsts = enable_hsts
        self.hsts_max_age = hsts_max_age
        self.enable_csp = enable_csp
        self.csp_policy = csp_policy
        self.no_store_paths = tuple(no_store_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Add security headers to the response."""
        response = await call_next(request)

        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Permissions-Policy"] = (
            "geolocation=(), microphone=(), camera=(), "
            "payment=(), usb=(), magnetometer=(), gyroscope=(), "
            "speaker=(self)"
        )
        response.headers["Cross-Origin-Opener-Policy"] = "same-origin"
        response.headers["Cross-Origin-Resource-Policy"] = "same-origin"
        # require-corp breaks the Swagger UI CDN assets
        response.headers["Cross-Origin-Embedder-Policy"] = "unsafe-none"

        if self._is_no_store_endpoint(request.url.path):
            response.headers["Cache-Control"] = (
                "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"
            )
            response.headers["Pragma"] = "no-cache"

        # HSTS - usually handled by reverse proxy
        if self.enable_hsts:
            response.headers["Strict-Transport-Security"] = (
                f"max-age={self.hsts_max_age}; includeSubDomains; preload"
            )

        if self.enable_csp and self.csp_policy:
            response.headers["Content-Security-Policy"] = self.csp_policy

        return response

    def _is_no_store_endpoint(self, path: str) -> bool:
        """True if responses for this path must not be cached."""
        return path.startswith(self.no_store_paths)
