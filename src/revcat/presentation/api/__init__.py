"""REST API presentation layer for revcat.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain exception -> HTTP response
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from revcat.presentation.api.app import create_app

__all__ = ["create_app"]
