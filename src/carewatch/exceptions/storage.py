"""Storage adapter exceptions."""

from __future__ import annotations

from carewatch.exceptions.base import CarewatchError


class StorageError(CarewatchError, OSError):
    """Raised when the case store file cannot be read or parsed."""
