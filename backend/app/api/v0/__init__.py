"""API v0 sub-application."""

from app.api.v0.main import app_v0

__all__ = ["app_v0"]
