"""Config data model for Skillet."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillet.constants.discovery import CLAUDE_DIR
from skillet.constants.plugins import INSTALLED_PLUGINS_FILENAME, PLUGINS_DIR
from skillet.constants.resolution import DEFAULT_FETCH_TIMEOUT_SECONDS, DEFAULT_URL_MAX_BYTES


@dataclass(frozen=True)
class SkilletConfig:
    """Resolved ambient state for one invocation.

    Everything that default source construction would otherwise read from the
    process (working directory, home directory, plugin manifest location) is
    carried here explicitly so that registries can be built hermetically.
    """

    work_dir: Path
    home_dir: Path | None = None
    plugin_manifest: Path | None = None
    url_max_bytes: int = DEFAULT_URL_MAX_BYTES
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS

    @property
    def effective_plugin_manifest(self) -> Path | None:
        """Manifest path, defaulting to ``~/.claude/plugins/installed_plugins.json``."""
        if self.plugin_manifest is not None:
            return self.plugin_manifest
        if self.home_dir is None:
            return None
        return self.home_dir / CLAUDE_DIR / PLUGINS_DIR / INSTALLED_PLUGINS_FILENAME
