"""Default severity rule table and detection message templates."""

from __future__ import annotations

SERIOUS_KEYWORDS: tuple[str, ...] = (
    "bạo hành",
    "xâm hại",
    "gãy xương",
    "chảy máu",
    "bỏng",
    "bất tỉnh",
)
MEDIUM_KEYWORDS: tuple[str, ...] = (
    "bạo lực",
    "bị đánh",
    "đánh đập",
    "bỏ đói",
    "đe dọa",
)
LOW_KEYWORDS: tuple[str, ...] = (
    "xước nhẹ",
    "xước",
    "trầy",
)

# (min, max]: the lower bound is excluded, the upper bound included.
SERIOUS_PERCENT_RANGE: tuple[int, int] = (50, 100)
MEDIUM_PERCENT_RANGE: tuple[int, int] = (20, 50)
LOW_PERCENT_RANGE: tuple[int, int] = (0, 20)

# Percentage ranges only apply when this term appears in the text.
RANGE_CONTEXT_KEYWORD: str = "bầm tím"

PERCENT_PATTERN: str = r"([0-9]+)\s*%"

REASONING_PREFIX: str = "Detected: "
KEYWORD_DELIMITER: str = ", "
NO_SIGNAL_MESSAGE: str = "Không phát hiện dấu hiệu bất thường"

PERCENT_MIN: int = 0
PERCENT_MAX: int = 100
