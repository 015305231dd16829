"""Core data models for Carewatch."""

from .entities import Case, CaseInput, CaseStats, ChildIdentity, DetectionResult, LevelMatch

__all__ = [
    "Case",
    "CaseInput",
    "CaseStats",
    "ChildIdentity",
    "DetectionResult",
    "LevelMatch",
]
