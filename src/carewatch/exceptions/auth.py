"""Identity provider exceptions."""

from __future__ import annotations

from carewatch.exceptions.base import CarewatchError


class AuthenticationError(CarewatchError, ValueError):
    """Raised when a username/password pair is rejected."""
