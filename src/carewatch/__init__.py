"""Carewatch: severity triage and role-scoped case tracking for child welfare notes."""

from __future__ import annotations

from carewatch.detectors.severity import classify
from carewatch.store import CaseStore

__version__ = "0.3.0"

__all__ = ["CaseStore", "__version__", "classify"]
