"""Root exception for Carewatch."""

from __future__ import annotations


class CarewatchError(Exception):
    """Base class for every error raised by Carewatch."""
