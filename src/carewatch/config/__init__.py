"""Configuration loading and normalization for Carewatch.

This package facade re-exports all public names so that callers can use
``from carewatch.config import ...``.
"""

from __future__ import annotations

from carewatch.config.loader import load_config
from carewatch.config.model import AccountConfig, CarewatchConfig

__all__ = [
    "AccountConfig",
    "CarewatchConfig",
    "load_config",
]
