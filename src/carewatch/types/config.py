"""Typed severity rule structures."""

from __future__ import annotations

from dataclasses import dataclass

from carewatch.constants.rules import (
    LOW_KEYWORDS,
    LOW_PERCENT_RANGE,
    MEDIUM_KEYWORDS,
    MEDIUM_PERCENT_RANGE,
    NO_SIGNAL_MESSAGE,
    RANGE_CONTEXT_KEYWORD,
    REASONING_PREFIX,
    SERIOUS_KEYWORDS,
    SERIOUS_PERCENT_RANGE,
)
from carewatch.types.common import Severity


@dataclass(frozen=True)
class LevelRule:
    """Keywords and optional ``(min, max]`` percentage range for one severity level."""

    keywords: tuple[str, ...] = ()
    percent_range: tuple[int, int] | None = None

    def in_range(self, percent: int) -> bool:
        """Whether ``percent`` falls inside this rule's range (lower bound excluded)."""
        if self.percent_range is None:
            return False
        low, high = self.percent_range
        return low < percent <= high


DEFAULT_LEVEL_RULES: tuple[tuple[Severity, LevelRule], ...] = (
    ("serious", LevelRule(keywords=SERIOUS_KEYWORDS, percent_range=SERIOUS_PERCENT_RANGE)),
    ("medium", LevelRule(keywords=MEDIUM_KEYWORDS, percent_range=MEDIUM_PERCENT_RANGE)),
    ("low", LevelRule(keywords=LOW_KEYWORDS, percent_range=LOW_PERCENT_RANGE)),
)


@dataclass(frozen=True)
class RuleTable:
    """Ordered severity rules plus the message templates used by the classifier."""

    levels: tuple[tuple[Severity, LevelRule], ...] = DEFAULT_LEVEL_RULES
    range_context: str = RANGE_CONTEXT_KEYWORD
    reasoning_prefix: str = REASONING_PREFIX
    no_signal_message: str = NO_SIGNAL_MESSAGE

    def rule_for(self, level: Severity) -> LevelRule:
        """Return the rule for ``level``, or an empty rule if the table omits it."""
        for name, rule in self.levels:
            if name == level:
                return rule
        return LevelRule()


DEFAULT_RULE_TABLE: RuleTable = RuleTable()
