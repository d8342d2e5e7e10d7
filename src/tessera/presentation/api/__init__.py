"""REST API presentation layer for Tessera.

Structure:
    api/
    ├── app.py          # FastAPI application factory
    ├── dependencies.py # Dependency injection and the guard dependency
    ├── errors.py       # Auth error code to HTTP status mapping
    ├── routers/        # API route handlers
    └── schemas/        # Pydantic request/response schemas
"""

from tessera.presentation.api.app import create_app

__all__ = ["create_app"]
