"""
Email thread detection heuristic.

Decides whether pasted correspondence holds several concatenated messages.
Every check is a single linear pass over the text (see patterns.py for how
the repetition checks avoid backtracking); the function is total over str
and holds no state between calls.

Thresholds are fixed constants; results must stay comparable across
deployments, so they are not read from Settings.
"""

import structlog

from thread_detection.detection.patterns import (
    DOTTED_SEPARATOR_RE,
    FORWARD_REPLY_KEYWORD_RE,
    HEADER_PATTERNS,
    MESSAGE_HEADER_COUNTERS,
    REPETITION_PATTERNS,
    SEPARATOR_LINE_RE,
    WORD_HEADER_RE,
)
from thread_detection.models.detection_result import DetectionResult
from thread_detection.models.enums import ConfidenceEnum

logger = structlog.get_logger(__name__)

MIN_SEPARATORS_FOR_VOTE = 2
MIN_KEYWORDS_FOR_INDICATOR = 2
HIGH_PATTERN_MATCHES = 2
MEDIUM_HEADER_COUNT = 4
LOW_HEADER_COUNT = 3
WORD_FORMAT_MIN_BLOCKS = 2


def detect_email_thread(raw_text: str) -> DetectionResult:
    """
    Analyze raw text to detect if it looks like an email thread.

    Args:
        raw_text: Correspondence text as pasted or imported, already decoded.
            May be empty or lack line breaks.

    Returns:
        DetectionResult with the decision, confidence and the indicators
        explaining it (never empty).

    Examples:
        >>> detect_email_thread("").confidence
        <ConfidenceEnum.LOW: 'low'>
    """
    indicators: list[str] = []

    header_count = sum(1 for p in HEADER_PATTERNS if p.matches(raw_text))

    thread_pattern_matches = 0
    for repetition in REPETITION_PATTERNS:
        if repetition.matches(raw_text):
            thread_pattern_matches += 1
            indicators.append(f"Multiple {repetition.label} found")

    # Recorded for the user only, does not vote
    header_occurrences = [len(r.findall(raw_text)) for r in MESSAGE_HEADER_COUNTERS]
    if max(header_occurrences) > 1:
        indicators.append(f"Detected {max(header_occurrences)} possible emails in thread")
    word_header_count = len(WORD_HEADER_RE.findall(raw_text))

    separator_count = len(SEPARATOR_LINE_RE.findall(raw_text))
    dotted_separator_count = len(DOTTED_SEPARATOR_RE.findall(raw_text))
    total_separators = separator_count + dotted_separator_count
    if total_separators >= MIN_SEPARATORS_FOR_VOTE:
        indicators.append(f"{total_separators} separator lines detected")
        thread_pattern_matches += 1

    # Corroborating context only, never a vote
    keyword_count = len(FORWARD_REPLY_KEYWORD_RE.findall(raw_text))
    if keyword_count >= MIN_KEYWORDS_FOR_INDICATOR:
        indicators.append(f"{keyword_count} forward/reply keywords found")

    if (
        dotted_separator_count >= WORD_FORMAT_MIN_BLOCKS
        and word_header_count >= WORD_FORMAT_MIN_BLOCKS
    ):
        confidence = ConfidenceEnum.HIGH
        indicators.append("high confidence: Word document format detected")
    elif thread_pattern_matches >= HIGH_PATTERN_MATCHES:
        confidence = ConfidenceEnum.HIGH
        indicators.append("high confidence: multiple thread patterns detected")
    elif thread_pattern_matches == 1 or (
        header_count >= MEDIUM_HEADER_COUNT and total_separators >= 1
    ):
        confidence = ConfidenceEnum.MEDIUM
        indicators.append("medium confidence: some thread indicators present")
    elif dotted_separator_count >= WORD_FORMAT_MIN_BLOCKS or word_header_count >= 1:
        confidence = ConfidenceEnum.MEDIUM
        indicators.append("medium confidence: Word format indicators present")
    elif header_count >= LOW_HEADER_COUNT:
        confidence = ConfidenceEnum.LOW
        indicators.append("low confidence: might be a single formatted email")
    else:
        confidence = ConfidenceEnum.LOW
        indicators.append("does not look like an email thread")

    logger.debug(
        "Thread detection complete",
        text_length=len(raw_text),
        header_count=header_count,
        thread_pattern_matches=thread_pattern_matches,
        separator_count=total_separators,
        keyword_count=keyword_count,
        confidence=confidence.value,
    )

    return DetectionResult(
        looks_like_thread=confidence != ConfidenceEnum.LOW,
        confidence=confidence,
        indicators=tuple(indicators),
    )


def should_default_to_split(raw_text: str) -> bool:
    """
    Decide whether the "split into multiple entries" toggle starts ON.

    Only HIGH confidence enables it: splitting changes how the entry is
    stored, so MEDIUM detections are left for the user to confirm.
    """
    return is_split_default(detect_email_thread(raw_text))


def is_split_default(detection: DetectionResult) -> bool:
    """True if an already computed detection should pre-enable the split toggle."""
    return detection.looks_like_thread and detection.confidence == ConfidenceEnum.HIGH
