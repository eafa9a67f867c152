"""Resolve ambient configuration from the running process."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from skillet.config.model import SkilletConfig
from skillet.constants.resolution import DEFAULT_FETCH_TIMEOUT_SECONDS, DEFAULT_URL_MAX_BYTES
from skillet.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(
    work_dir: Path | None = None,
    home_dir: Path | None = None,
    *,
    plugin_manifest: Path | None = None,
    url_max_bytes: int = DEFAULT_URL_MAX_BYTES,
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
) -> SkilletConfig:
    """Build a config, filling unset paths from the process environment.

    An undeterminable home directory is not an error: the user source and the
    plugin manifest are simply left out.
    """
    if work_dir is None:
        work_dir = Path(os.getcwd())
    elif not work_dir.is_dir():
        raise ConfigError(f"Working directory not found: {work_dir}")

    if home_dir is None:
        home_dir = _user_home()

    if isinstance(url_max_bytes, bool) or not isinstance(url_max_bytes, int) or url_max_bytes <= 0:
        raise ConfigError("url_max_bytes must be a positive integer")
    if fetch_timeout_seconds <= 0:
        raise ConfigError("fetch_timeout_seconds must be positive")

    return SkilletConfig(
        work_dir=work_dir.resolve(),
        home_dir=home_dir,
        plugin_manifest=plugin_manifest,
        url_max_bytes=url_max_bytes,
        fetch_timeout_seconds=fetch_timeout_seconds,
    )


def _user_home() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        logger.debug("Home directory could not be determined; skipping user and plugin sources")
        return None
