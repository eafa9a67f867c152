"""Root exception type."""

from __future__ import annotations


class SkilletError(Exception):
    """Base class for all errors raised by Skillet."""
