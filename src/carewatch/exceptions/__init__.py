"""Shared exception hierarchy for Carewatch."""

from __future__ import annotations

from .auth import AuthenticationError
from .base import CarewatchError
from .cases import NotFoundError, PermissionError, ValidationError
from .config import ConfigError
from .storage import StorageError

__all__ = [
    "AuthenticationError",
    "CarewatchError",
    "ConfigError",
    "NotFoundError",
    "PermissionError",
    "StorageError",
    "ValidationError",
]
