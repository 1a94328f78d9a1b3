"""
FastAPI API routes and endpoints.

- routes.py: POST /thread-detection, GET /health
- dependencies.py: Dependency injection (settings)
- models.py: API-specific request/response models
- exceptions.py: Request-level exceptions (size guard)
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request ID tracing
"""

from thread_detection.api import dependencies, error_handlers, models
from thread_detection.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
