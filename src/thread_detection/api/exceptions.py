"""
Request-level exceptions for the detection service.

The classifier itself never raises; these guard the HTTP surface before
text reaches it.
"""

from typing import Any


class DetectionRequestError(Exception):
    """
    Base exception for rejected detection requests.

    Not raised directly: each subclass maps to its own status code in
    error_handlers.EXCEPTION_HANDLERS.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize request error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InputTooLargeError(DetectionRequestError):
    """
    Text exceeds MAX_INPUT_CHARS.

    Example details:
        {"input_length": 250000, "max_input_chars": 200000}
    """

    def __init__(self, input_length: int, max_input_chars: int):
        super().__init__(
            f"Input of {input_length} characters exceeds limit of {max_input_chars}",
            details={"input_length": input_length, "max_input_chars": max_input_chars},
        )
        self.input_length = input_length
        self.max_input_chars = max_input_chars
