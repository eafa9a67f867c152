"""Shared exception hierarchy for Skillet."""

from __future__ import annotations

from .base import SkilletError
from .config import ConfigError, PluginManifestError
from .resolution import AmbiguousResourceError, ResolutionError, ResourceFetchError, ResourceNotFoundError

__all__ = [
    "AmbiguousResourceError",
    "ConfigError",
    "PluginManifestError",
    "ResolutionError",
    "ResourceFetchError",
    "ResourceNotFoundError",
    "SkilletError",
]
