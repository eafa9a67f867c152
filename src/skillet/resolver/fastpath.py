"""Fast paths that bypass registry lookup: URLs and existing filesystem paths."""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path
from urllib.parse import urlparse

from skillet.constants.discovery import SKILL_MARKER_FILENAME
from skillet.constants.resolution import URL_SCHEMES
from skillet.model import ResolveResult
from skillet.types import ResourceKind

logger = logging.getLogger(__name__)


def is_url(value: str) -> bool:
    """Return True for a well-formed ``http(s)://host/...`` URL."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme.lower() in URL_SCHEMES and bool(parsed.netloc)


def classify_path(path: Path) -> ResourceKind:
    """The skill marker filename means a skill; any other file is a command."""
    if path.name.casefold() == SKILL_MARKER_FILENAME.casefold():
        return "skill"
    return "command"


def probe_local_path(query: str) -> ResolveResult | None:
    """Resolve ``query`` as an existing file, or a directory holding the skill marker.

    Returns ``None`` when the query is not such a path, including names the
    filesystem rejects as too long or as containing NUL. Other errors such
    as ``PermissionError`` are raised.
    """
    path = Path(query)
    info = _stat_or_none(path)
    if info is None:
        return None

    if not stat.S_ISDIR(info.st_mode):
        absolute = Path(os.path.abspath(path))
        logger.debug("Resolved %r as an existing file", query)
        return ResolveResult(path=absolute, kind=classify_path(absolute))

    marker = path / SKILL_MARKER_FILENAME
    if _stat_or_none(marker) is None:
        return None
    logger.debug("Resolved %r as a skill directory", query)
    return ResolveResult(path=Path(os.path.abspath(marker)), kind="skill")


def _stat_or_none(path: Path) -> os.stat_result | None:
    try:
        return path.stat()
    except (FileNotFoundError, NotADirectoryError, ValueError):
        return None
    except OSError as exc:
        if exc.errno == errno.ENAMETOOLONG:
            return None
        raise
