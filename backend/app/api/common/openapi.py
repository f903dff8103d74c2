"""OpenAPI schema customization utilities for common APIs."""

from collections.abc import Callable
from typing import Any

from fastapi import FastAPI


def sort_schemas_by_namespace(openapi_schema: dict[str, Any]) -> dict[str, Any]:
    """Sort schemas by namespace (title prefix) first, then alphabetically.

    Schemas are sorted by their title attribute (e.g., 'classroom.ClassroomRecord', 'status.StatusReport').
    First by namespace (academic_year, classroom, error, learning_type, status), then alphabetically
    within each namespace.

    Args:
        openapi_schema: The generated OpenAPI schema dictionary

    Returns:
        Modified OpenAPI schema with sorted schemas
    """
    if (
        "components" not in openapi_schema
        or "schemas" not in openapi_schema["components"]
    ):
        return openapi_schema

    schemas = openapi_schema["components"]["schemas"]

    def get_sort_key(item: tuple[str, dict]) -> tuple[str, str]:
        schema_name, schema_def = item
        title = schema_def.get("title", schema_name)
        if "." in title:
            namespace, name = title.split(".", 1)
            return (namespace, name)
        # If no namespace, sort after all namespaced schemas
        return ("zzz_no_namespace", title)

    openapi_schema["components"]["schemas"] = dict(
        sorted(schemas.items(), key=get_sort_key)
    )

    return openapi_schema


def create_custom_openapi(app: FastAPI) -> Callable:
    """Factory function to create a custom OpenAPI schema generator.

    This factory creates a closure that:
    1. Caches the generated OpenAPI schema
    2. Sorts schemas by namespace first, then alphabetically

    Args:
        app: FastAPI application instance

    Returns:
        Custom OpenAPI schema generator function
    """
    _original_openapi = app.openapi

    def custom_openapi() -> dict[str, Any]:
        """Generate and cache custom OpenAPI schema."""
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = sort_schemas_by_namespace(_original_openapi())

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    return custom_openapi
