"""Configuration-related exceptions."""

from __future__ import annotations

from skillet.exceptions.base import SkilletError


class ConfigError(SkilletError, ValueError):
    """Raised when ambient configuration is invalid."""


class PluginManifestError(SkilletError, ValueError):
    """Raised when the installed-plugins manifest cannot be read or is malformed."""
