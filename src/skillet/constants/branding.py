"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "skillet"
CLI_DESCRIPTION: str = (
    "Locate Claude skills and commands across project, user, and plugin sources\n"
    "and resolve a (optionally namespaced) name to exactly one file."
)
