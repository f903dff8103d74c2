"""Routers shared across API versions."""
