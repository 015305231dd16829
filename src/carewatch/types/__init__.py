"""Shared type aliases for Carewatch."""

from .common import DocumentType, JsonObject, JsonScalar, JsonValue, Role, Severity
from .config import LevelRule, RuleTable

__all__ = [
    "DocumentType",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "LevelRule",
    "Role",
    "RuleTable",
    "Severity",
]
