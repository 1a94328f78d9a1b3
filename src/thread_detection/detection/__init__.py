"""
Thread classifier.

- patterns.py: fixed signal catalog (header and repetition patterns)
- detector.py: detect_email_thread / should_default_to_split
"""

from thread_detection.detection.detector import (
    detect_email_thread,
    is_split_default,
    should_default_to_split,
)
from thread_detection.detection.patterns import (
    HEADER_PATTERNS,
    REPETITION_PATTERNS,
    RepetitionPattern,
    ThreadPattern,
)

__all__ = [
    "detect_email_thread",
    "is_split_default",
    "should_default_to_split",
    "HEADER_PATTERNS",
    "REPETITION_PATTERNS",
    "RepetitionPattern",
    "ThreadPattern",
]
