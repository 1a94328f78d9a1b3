"""
Email thread detection for the correspondence tracker.

Inspects pasted or imported correspondence text and decides whether it holds
several concatenated messages that should be split into separate entries:
- Header and repetition pattern catalog
- Confidence grading (low / medium / high) with human-readable indicators
- Split-toggle default (only on high confidence)

Architecture: pure classifier + thin FastAPI detection service
"""

from thread_detection.detection.detector import (
    detect_email_thread,
    should_default_to_split,
)
from thread_detection.models import ConfidenceEnum, DetectionResult

__version__ = "0.1.0"

__all__ = [
    "detect_email_thread",
    "should_default_to_split",
    "ConfidenceEnum",
    "DetectionResult",
]
