"""
Pydantic data models for thread detection.

Includes:
- Enums (ConfidenceEnum)
- Output models (DetectionResult)
"""

from thread_detection.models.enums import ConfidenceEnum
from thread_detection.models.detection_result import DetectionResult

__all__ = [
    "ConfidenceEnum",
    "DetectionResult",
]
