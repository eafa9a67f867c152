"""Constants for the installed-plugins manifest."""

from __future__ import annotations

from typing import Any

PLUGINS_DIR: str = "plugins"
INSTALLED_PLUGINS_FILENAME: str = "installed_plugins.json"
PLUGIN_MARKETPLACE_SEPARATOR: str = "@"

INSTALLED_PLUGINS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "version": {"type": "integer"},
        "plugins": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "scope": {"type": "string"},
                        "installPath": {"type": "string", "minLength": 1},
                        "version": {"type": "string"},
                    },
                    "required": ["installPath"],
                },
            },
        },
    },
}
