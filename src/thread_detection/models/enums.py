"""
Enumerations for thread detection data models.
"""

from enum import Enum


class ConfidenceEnum(str, Enum):
    """
    Strength of the evidence that a text is an email thread.

    Ordered from low to high (can be used for ordinal comparisons).
    Only HIGH may auto-enable the split toggle.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def get_ordinal(cls, confidence: "ConfidenceEnum") -> int:
        """Get ordinal value for confidence (0=low, 1=medium, 2=high)."""
        order = [cls.LOW, cls.MEDIUM, cls.HIGH]
        return order.index(confidence)
