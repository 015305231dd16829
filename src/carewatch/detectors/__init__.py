"""Rule-based text severity detection."""

from .severity import classify, match_level
from .text import extract_percentage, normalize_text

__all__ = ["classify", "extract_percentage", "match_level", "normalize_text"]
