"""Security utilities and middleware.

This module provides:
- Security headers middleware for OWASP compliance
"""

from app.security.headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
]
