"""Configuration-related exceptions."""

from __future__ import annotations

from carewatch.exceptions.base import CarewatchError


class ConfigError(CarewatchError, ValueError):
    """Raised when ``carewatch.yaml`` is invalid."""
