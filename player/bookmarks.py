"""
Violation bookmarks

Hardened for proctoring feeds:
- Malformed annotations are skipped, never raised
- Timestamp token may appear anywhere; the first one wins
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .categories import categorize
from .timefmt import format_time

logger = logging.getLogger(__name__)

WINDOW_SECONDS = 60

_DIGITS = "0123456789"


@dataclass(frozen=True)
class ViolationBookmark:
    """
    One parsed violation with its lookback window.
    """
    violation_time: int
    window_start: int
    label: str
    description: str
    category: str = "other"

    def __post_init__(self):
        if self.window_start > self.violation_time:
            raise ValueError("window_start must be <= violation_time")

    @property
    def display_range(self) -> str:
        return f"{format_time(self.window_start)} - {format_time(self.violation_time)}"

    def contains(self, t: float) -> bool:
        return self.window_start <= t <= self.violation_time


# --------------------------------------------------
# Timestamp Tokenizer
# --------------------------------------------------

def find_timestamp(text: str) -> Optional[Tuple[int, int, int]]:
    """
    Locate the first "[MM:SS]" token in text.

    Returns (start, end, seconds) where text[start:end] is the token,
    or None when no token exists.
    """
    pos = text.find("[")

    while pos != -1:
        token = text[pos:pos + 7]
        if (
            len(token) == 7
            and token[1] in _DIGITS
            and token[2] in _DIGITS
            and token[3] == ":"
            and token[4] in _DIGITS
            and token[5] in _DIGITS
            and token[6] == "]"
        ):
            minutes = int(token[1:3])
            seconds = int(token[4:6])
            return pos, pos + 7, minutes * 60 + seconds

        pos = text.find("[", pos + 1)

    return None


def _strip_token(text: str, start: int, end: int) -> str:
    # Only the first token and the whitespace right after it are removed
    rest = text[end:].lstrip()
    return text[:start] + rest


def parse_violation(text) -> Optional[ViolationBookmark]:
    if not isinstance(text, str):
        return None

    found = find_timestamp(text)
    if found is None:
        return None

    start, end, violation_time = found
    description = _strip_token(text, start, end)

    return ViolationBookmark(
        violation_time=violation_time,
        window_start=max(0, violation_time - WINDOW_SECONDS),
        label=text[start + 1:end - 1],
        description=description,
        category=categorize(description),
    )


def parse_bookmarks(violations: Iterable[str]) -> List[ViolationBookmark]:
    """
    Derive the sorted bookmark list from raw violation annotations.
    """
    parsed: List[ViolationBookmark] = []

    for index, text in enumerate(violations or []):
        bookmark = parse_violation(text)
        if bookmark is None:
            logger.debug("Skipping violation %d without timestamp: %r", index, text)
            continue
        parsed.append(bookmark)

    # sorted() is stable, ties keep feed order
    return sorted(parsed, key=lambda b: b.violation_time)
