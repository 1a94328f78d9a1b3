"""
FastAPI exception handlers for structured error responses.

Maps request exceptions to appropriate HTTP status codes and formats.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from thread_detection.api.exceptions import InputTooLargeError

logger = structlog.get_logger(__name__)


async def input_too_large_handler(request: Request, exc: InputTooLargeError) -> JSONResponse:
    """
    Handle oversized detection input.

    Maps to 413 Content Too Large.

    Args:
        request: FastAPI request
        exc: InputTooLargeError instance

    Returns:
        JSON error response
    """
    logger.warning("Input too large", **exc.details)

    return JSONResponse(
        status_code=status.HTTP_413_CONTENT_TOO_LARGE,
        content={
            "error": "input_too_large",
            "message": exc.message,
            "details": exc.details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    InputTooLargeError: input_too_large_handler,
    Exception: generic_error_handler,
}
