"""
Output model of the thread classifier.

A DetectionResult is built fresh on every call and never mutated afterwards.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from thread_detection.models.enums import ConfidenceEnum


class DetectionResult(BaseModel):
    """
    Decision, confidence and rationale trail for one piece of text.

    Invariant: looks_like_thread is True exactly when confidence is
    MEDIUM or HIGH.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    looks_like_thread: bool = Field(..., description="Final classification")
    confidence: ConfidenceEnum = Field(..., description="Ordinal strength of evidence")
    indicators: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Human-readable explanations, in the order the checks ran",
    )

    @model_validator(mode="after")
    def check_decision_matches_confidence(self) -> "DetectionResult":
        """Reject results whose decision disagrees with their confidence."""
        if self.looks_like_thread != (self.confidence != ConfidenceEnum.LOW):
            raise ValueError(
                f"looks_like_thread={self.looks_like_thread} is inconsistent "
                f"with confidence={self.confidence.value}"
            )
        return self
