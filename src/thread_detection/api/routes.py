"""
API routes for thread detection.

The classifier is pure and fast, so detection runs inline in the request.
The size cap is enforced here, before the text reaches the classifier.
"""

import time
from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, status

from thread_detection.api.dependencies import get_settings
from thread_detection.api.exceptions import InputTooLargeError
from thread_detection.api.models import (
    HealthResponse,
    ThreadDetectionRequest,
    ThreadDetectionResponse,
)
from thread_detection.config import Settings
from thread_detection.detection.detector import detect_email_thread, is_split_default
from thread_detection.monitoring.metrics import (
    thread_detection_duration_seconds,
    thread_detection_rejections_total,
    thread_detections_total,
)

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/thread-detection",
    response_model=ThreadDetectionResponse,
    status_code=status.HTTP_200_OK,
    summary="Detect whether text is an email thread",
    description="""
    Inspect pasted or imported correspondence and decide whether it holds
    several concatenated messages.

    `should_default_to_split` is only a suggestion for the initial toggle
    state; show `result.indicators` so the user can confirm the split.
    """,
    responses={
        200: {"description": "Detection completed"},
        413: {"description": "Input exceeds MAX_INPUT_CHARS"},
        422: {"description": "Invalid request body"},
    },
)
def detect_thread(
    request: ThreadDetectionRequest,
    settings: Settings = Depends(get_settings),
) -> ThreadDetectionResponse:
    """
    Run the thread classifier on the submitted text.

    Declared with plain ``def``: classification is CPU-bound, so FastAPI
    runs it in its worker thread pool and the event loop keeps serving
    other requests meanwhile.

    Args:
        request: ThreadDetectionRequest with the raw text
        settings: Application settings (injected)

    Returns:
        ThreadDetectionResponse with the detection result

    Raises:
        InputTooLargeError: If raw_text is longer than MAX_INPUT_CHARS
    """
    input_length = len(request.raw_text)
    if input_length > settings.MAX_INPUT_CHARS:
        thread_detection_rejections_total.labels(reason="input_too_large").inc()
        raise InputTooLargeError(input_length, settings.MAX_INPUT_CHARS)

    start_time = time.perf_counter()
    result = detect_email_thread(request.raw_text)
    elapsed = time.perf_counter() - start_time

    thread_detection_duration_seconds.observe(elapsed)
    thread_detections_total.labels(
        confidence=result.confidence.value,
        looks_like_thread=str(result.looks_like_thread).lower(),
    ).inc()

    logger.info(
        "Thread detection served",
        input_length=input_length,
        confidence=result.confidence.value,
        looks_like_thread=result.looks_like_thread,
        indicators_count=len(result.indicators),
    )

    return ThreadDetectionResponse(
        result=result,
        should_default_to_split=is_split_default(result),
        input_length=input_length,
        processing_duration_ms=round(elapsed * 1000, 3),
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Liveness check; the service has no downstream dependencies."""
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc),
    )
