"""Severity classification over the rule table.

Levels are evaluated strictly from most to least severe and the first level
with any match wins, so overlapping keyword sets always resolve to the
highest severity.
"""

from __future__ import annotations

import logging

from carewatch.constants.rules import KEYWORD_DELIMITER
from carewatch.constants.scoring import SEVERITY_PRECEDENCE
from carewatch.detectors.text import extract_percentage, normalize_text
from carewatch.model import DetectionResult, LevelMatch
from carewatch.types import LevelRule, RuleTable
from carewatch.types.config import DEFAULT_RULE_TABLE

logger = logging.getLogger(__name__)


def match_level(
    normalized: str,
    rule: LevelRule,
    *,
    range_context: str,
    reasoning_prefix: str = DEFAULT_RULE_TABLE.reasoning_prefix,
) -> LevelMatch:
    """Match one level's keywords and percentage range against normalized text."""
    matched = [kw for kw in rule.keywords if kw in normalized]

    if rule.percent_range is not None and range_context in normalized:
        percent = extract_percentage(normalized)
        if percent is not None and rule.in_range(percent):
            matched.append(f"{range_context} {percent}%")

    if not matched:
        return LevelMatch(found=False)
    return LevelMatch(
        found=True,
        matched_keywords=tuple(matched),
        reasoning=reasoning_prefix + KEYWORD_DELIMITER.join(matched),
    )


def classify(text: str, rules: RuleTable = DEFAULT_RULE_TABLE) -> DetectionResult:
    """Classify free text as ``serious``, ``medium`` or ``low``.

    Never raises: text without any signal is reported as ``low`` with no
    matched keywords and the table's no-signal message.
    """
    normalized = normalize_text(text)
    for level in SEVERITY_PRECEDENCE:
        result = match_level(
            normalized,
            rules.rule_for(level),
            range_context=rules.range_context,
            reasoning_prefix=rules.reasoning_prefix,
        )
        if result.found:
            logger.debug("Classified as %s (%d keyword(s))", level, len(result.matched_keywords))
            return DetectionResult(
                level=level,
                matched_keywords=result.matched_keywords,
                reasoning=result.reasoning,
            )

    logger.debug("No severity signal found")
    return DetectionResult(level="low", matched_keywords=(), reasoning=rules.no_signal_message)
