"""Text normalization and percentage extraction."""

from __future__ import annotations

import re

from carewatch.constants.rules import PERCENT_PATTERN

_PERCENT_RE: re.Pattern[str] = re.compile(PERCENT_PATTERN)


def normalize_text(text: str) -> str:
    """Strip surrounding whitespace and lowercase for case-insensitive matching."""
    return text.strip().lower()


def extract_percentage(text: str) -> int | None:
    """Return the first integer directly followed by ``%``, or ``None``.

    Digits are not required to be word-bounded, so ``"abc60%"`` yields 60.
    Later percentages in the text are ignored.
    """
    match = _PERCENT_RE.search(text)
    if match is None:
        return None
    return int(match.group(1))
