"""Severity ordering and evaluation precedence."""

from __future__ import annotations

SEVERITY_RANK: dict[str, int] = {"low": 0, "medium": 1, "serious": 2}

# Evaluation order of the classifier; the most severe level always wins.
SEVERITY_PRECEDENCE: tuple[str, ...] = tuple(sorted(SEVERITY_RANK, key=SEVERITY_RANK.__getitem__, reverse=True))

VALID_SEVERITIES: frozenset[str] = frozenset(SEVERITY_RANK)
