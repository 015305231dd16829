"""Case store exceptions.

All of them are raised before the store is touched, so a failed call never
leaves a partial mutation behind.
"""

from __future__ import annotations

import builtins

from carewatch.exceptions.base import CarewatchError


class ValidationError(CarewatchError, ValueError):
    """Raised when case input is missing or malformed."""


class PermissionError(CarewatchError, builtins.PermissionError):  # noqa: A001
    """Raised when a role lacks the capability to edit or delete a case."""


class NotFoundError(CarewatchError, LookupError):
    """Raised when an operation references a case id that does not exist."""

    def __init__(self, case_id: int) -> None:
        super().__init__(f"Case not found: {case_id}")
        self.case_id = case_id
