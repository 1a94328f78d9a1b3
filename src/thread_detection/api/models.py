"""
API-specific request and response models for FastAPI endpoints.

These models wrap the core DetectionResult with request metadata.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from thread_detection.models.detection_result import DetectionResult


class ThreadDetectionRequest(BaseModel):
    """Request for the thread detection endpoint."""

    raw_text: str = Field(
        description="Decoded correspondence text to inspect (may be empty)",
        examples=["From: alice@example.com\nSubject: Invoice\n\nPlease see attached."],
    )


class ThreadDetectionResponse(BaseModel):
    """Response for the thread detection endpoint."""

    result: DetectionResult = Field(
        description="Decision, confidence and indicators"
    )
    should_default_to_split: bool = Field(
        description="Initial state for the split toggle (true only on high confidence)"
    )
    input_length: int = Field(
        ge=0,
        description="Number of characters inspected"
    )
    processing_duration_ms: float = Field(
        ge=0.0,
        description="Classification time in milliseconds"
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Service status",
        examples=["healthy"]
    )
    version: str = Field(
        description="Service version"
    )
    timestamp: datetime = Field(
        description="Health check timestamp (UTC)"
    )
