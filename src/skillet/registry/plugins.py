"""Load installed plugins and turn them into discovery sources."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import jsonschema

from skillet.constants.discovery import KIND_SUBDIRS, PLUGIN_SOURCE_PREFIX, PLUGIN_START_PRIORITY
from skillet.constants.plugins import INSTALLED_PLUGINS_SCHEMA, PLUGIN_MARKETPLACE_SEPARATOR
from skillet.exceptions import PluginManifestError
from skillet.io import load_json_file
from skillet.model import PluginInstall, Source
from skillet.types import ResourceKind

logger = logging.getLogger(__name__)

_MANIFEST_VALIDATOR = jsonschema.Draft202012Validator(INSTALLED_PLUGINS_SCHEMA)


def load_plugin_installs(manifest_path: Path | None) -> list[PluginInstall]:
    """Read the installed-plugins manifest.

    A missing manifest (or no manifest path at all) means no plugins are
    installed and yields an empty list. Unreadable, non-JSON, or structurally
    invalid manifests raise ``PluginManifestError``.

    One ``PluginInstall`` is produced per scope installation, ordered by bare
    plugin name so that priorities assigned later are stable across runs.
    """
    if manifest_path is None or not manifest_path.exists():
        return []

    try:
        payload = load_json_file(manifest_path)
    except OSError as exc:
        raise PluginManifestError(f"Cannot read plugins manifest at {manifest_path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PluginManifestError(f"Invalid JSON in plugins manifest at {manifest_path}: {exc}") from exc

    errors = sorted(_MANIFEST_VALIDATOR.iter_errors(payload), key=lambda err: list(err.absolute_path))
    if errors:
        first = errors[0]
        location = "/".join(str(part) for part in first.absolute_path) or "<root>"
        raise PluginManifestError(f"Invalid plugins manifest at {manifest_path}: {location}: {first.message}")

    plugins_raw = payload.get("plugins", {}) if isinstance(payload, dict) else {}
    installs: list[PluginInstall] = []
    for full_name, entries in plugins_raw.items():
        name = plugin_name_from_key(full_name)
        for entry in entries:
            installs.append(
                PluginInstall(
                    name=name,
                    full_name=full_name,
                    install_path=Path(entry["installPath"]).expanduser(),
                    scope=entry.get("scope", ""),
                    version=entry.get("version", ""),
                )
            )

    installs.sort(key=lambda install: install.name)
    logger.debug("Loaded %d plugin installation(s) from %s", len(installs), manifest_path)
    return installs


def plugin_name_from_key(full_name: str) -> str:
    """Extract ``name`` from a ``name@marketplace`` manifest key."""
    name, _, _ = full_name.partition(PLUGIN_MARKETPLACE_SEPARATOR)
    return name


def plugin_sources(
    installs: list[PluginInstall],
    kind: ResourceKind,
    start_priority: int = PLUGIN_START_PRIORITY,
) -> list[Source]:
    """Return one source per install for the given kind's subtree."""
    subdir = KIND_SUBDIRS[kind]
    return [
        Source(
            path=install.install_path / subdir,
            name=f"{PLUGIN_SOURCE_PREFIX}{install.name}",
            priority=start_priority + index,
            namespace=install.name,
        )
        for index, install in enumerate(installs)
    ]
