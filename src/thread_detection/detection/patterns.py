"""
Signal catalog for email thread detection.

Patterns are frozen dataclasses stored in tuples: compiled once at import,
never mutated, safe to share across threads and requests.

- HEADER_PATTERNS: markers of a single message (weak evidence, counted once each)
- REPETITION_PATTERNS: a header-like marker seen twice with content in between
  (direct evidence of concatenation)

Free-text spans inside a marker ("On <...> wrote:", "Email from <...> to <...>,")
are limited to MAX_MARKER_SPAN characters, so a failed match attempt costs a
bounded amount of work no matter how long the line is.
"""

import re
from dataclasses import dataclass

MAX_MARKER_SPAN = 200


@dataclass(frozen=True)
class ThreadPattern:
    """A labelled, compiled pattern from the signal catalog."""

    label: str
    pattern: re.Pattern[str]

    def matches(self, text: str) -> bool:
        """True if the pattern occurs anywhere in text."""
        return self.pattern.search(text) is not None


@dataclass(frozen=True)
class RepetitionPattern:
    """
    A marker that must occur twice, at least ``min_gap`` characters apart.

    Equivalent to searching ``<marker>[\\s\\S]{min_gap,}?<marker>``, but decided
    from the earliest end and the latest start of any marker occurrence, so
    the cost stays linear in the text length instead of rescanning the tail
    of the text from every candidate first occurrence.
    """

    label: str
    occurrence: re.Pattern[str]
    min_gap: int

    def matches(self, text: str) -> bool:
        first = self.occurrence.search(text)
        if first is None:
            return False

        # A later start may still end earlier when occurrences overlap
        earliest_end = first.end()
        pos = first.start() + 1
        while pos < earliest_end - 1:
            overlap = self.occurrence.search(text, pos, earliest_end - 1)
            if overlap is None:
                break
            earliest_end = overlap.end()
            pos = overlap.start() + 1

        last = first
        for last in self.occurrence.finditer(text, first.end()):
            pass
        latest_start = last.start()
        # finditer skips occurrences that start inside the previous one
        while True:
            overlap = self.occurrence.search(text, latest_start + 1)
            if overlap is None:
                break
            latest_start = overlap.start()

        return latest_start - earliest_end >= self.min_gap


def _p(label: str, regex: str, flags: int = 0) -> ThreadPattern:
    """Shorthand for defining a catalog entry."""
    return ThreadPattern(label=label, pattern=re.compile(regex, flags))


def _r(label: str, marker: str, min_gap: int, flags: int = re.IGNORECASE) -> RepetitionPattern:
    """Shorthand for defining a repetition entry."""
    return RepetitionPattern(label=label, occurrence=re.compile(marker, flags), min_gap=min_gap)


_IM = re.IGNORECASE | re.MULTILINE
_SPAN = r".{1,%d}?" % MAX_MARKER_SPAN

_REPLY_OPENER = r"On\s+" + _SPAN + r"wrote:"
_WORD_SENDER = r"Email from " + _SPAN + " to " + _SPAN + ","
# Word exports render each message as "Email from X to Y, 3/14/2024"
_WORD_HEADER = r"^" + _WORD_SENDER + r"\s*\d{1,2}/\d{1,2}/\d{2,4}"

HEADER_PATTERNS: tuple[ThreadPattern, ...] = (
    _p("From header", r"^From:\s*.+", _IM),
    _p("To header", r"^To:\s*.+", _IM),
    _p("Subject header", r"^Subject:\s*.+", _IM),
    _p("Date header", r"^Date:\s*.+", _IM),
    _p("Sent header", r"^Sent:\s*.+", _IM),
    _p("reply opener", r"^" + _REPLY_OPENER, _IM),
    _p("original message marker", r"^-{3,}\s*Original Message\s*-{3,}", _IM),
    _p("forwarded message marker", r"^-{3,}\s*Forwarded Message\s*-{3,}", _IM),
    _p("underscore separator", r"^_{5,}", re.MULTILINE),  # Outlook
    _p("dotted separator", r"\.{20,}", re.MULTILINE),  # Word export
    _p("Word export header", _WORD_HEADER, _IM),
)

REPETITION_PATTERNS: tuple[RepetitionPattern, ...] = (
    _r('"From:" headers', r"From:", 20),
    _r('"On ... wrote:" quotes', _REPLY_OPENER, 50),
    _r('"Subject:" lines', r"Subject:", 20),
    _r('"Sent:" headers', r"Sent:", 20),  # Outlook threads
    _r('"Email from ... to ..." headers', _WORD_SENDER, 20),
    _r("dotted separator blocks", r"\.{20}", 20, flags=0),
)

# Line-anchored headers counted per occurrence to estimate the message count
MESSAGE_HEADER_COUNTERS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^From:\s*", re.MULTILINE),
    re.compile(r"^Sent:\s*", re.MULTILINE),
    re.compile(r"^Subject:\s*", re.MULTILINE),
    re.compile(_WORD_HEADER, _IM),
)

WORD_HEADER_RE = MESSAGE_HEADER_COUNTERS[-1]

SEPARATOR_LINE_RE = re.compile(r"^[-_]{5,}", re.MULTILINE)
DOTTED_SEPARATOR_RE = re.compile(r"\.{20,}", re.MULTILINE)

FORWARD_REPLY_KEYWORD_RE = re.compile(
    r"(forwarded|original message|reply|re:|fwd:)", re.IGNORECASE
)
