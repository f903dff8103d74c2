"""API configuration for the Orar application.

Versioned APIs are implemented as FastAPI sub-applications:
- v0: mounted at /api/v0 (see app.api.v0)

Common routers shared across API versions:
- Status (see app.api.common.routers.status)
- Classroom, learning type and academic year validation
  (see app.api.common.routers.classrooms, learning_types, academic_years)
"""

__all__ = []
