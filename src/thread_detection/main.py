"""
FastAPI application entry point for the thread detection service.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from thread_detection.api.error_handlers import EXCEPTION_HANDLERS
from thread_detection.api.middleware import RequestTracingMiddleware
from thread_detection.api.routes import router
from thread_detection.config import settings
from thread_detection.logging_config import configure_logging

# Configure structured logging before any other imports
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT, settings.APP_VERSION)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Detects pasted correspondence that contains several concatenated emails",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware, slow_request_ms=settings.SLOW_REQUEST_MS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["detection"])


@app.on_event("startup")
async def startup():
    """Application startup."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        max_input_chars=settings.MAX_INPUT_CHARS,
    )


@app.on_event("shutdown")
async def shutdown():
    """Application shutdown."""
    logger.info("Application shutdown")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "detect": "/thread-detection",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "thread_detection.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
