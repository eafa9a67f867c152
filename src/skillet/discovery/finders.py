"""Per-source filesystem finders for skills and commands."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from skillet.constants.discovery import (
    COMMAND_EXTENSION,
    MAX_SKILL_DIR_DEPTH,
    NAMESPACE_PATH_SEPARATOR,
    SKILL_MARKER_FILENAME,
)
from skillet.model import DiscoveredResource, Source
from skillet.types import ResourceKind

logger = logging.getLogger(__name__)


class ResourceFinder(Protocol):
    """Finds the resources of one source, ignoring precedence."""

    kind: ResourceKind

    def find(self, source: Source) -> list[DiscoveredResource]:
        """Return every resource under ``source.path``."""
        ...


class SkillFinder:
    """Finds ``<source>/<name>/SKILL.md`` and ``<source>/<namespace>/<name>/SKILL.md``.

    Deeper layouts are not skills and are skipped without error.
    """

    kind: ResourceKind = "skill"

    def find(self, source: Source) -> list[DiscoveredResource]:
        root = source.path.absolute()
        found: list[DiscoveredResource] = []
        for directory, relative, dirnames, filenames in _walk(root):
            depth = len(relative.parts)
            if depth >= MAX_SKILL_DIR_DEPTH:
                dirnames.clear()
            if depth == 0:
                continue

            if depth == 1:
                namespace, name = "", relative.parts[0]
            else:
                namespace, name = relative.parts[0], relative.parts[1]

            for filename in filenames:
                if filename.casefold() != SKILL_MARKER_FILENAME.casefold():
                    continue
                found.append(
                    DiscoveredResource(
                        name=name,
                        path=directory / filename,
                        source=source,
                        kind=self.kind,
                        namespace=_compose_namespace(source.namespace, namespace),
                    )
                )
        return found


class CommandFinder:
    """Finds every ``*.md`` file in a source tree.

    The relative directory of a command is its namespace, at any depth.
    """

    kind: ResourceKind = "command"

    def find(self, source: Source) -> list[DiscoveredResource]:
        root = source.path.absolute()
        found: list[DiscoveredResource] = []
        for directory, relative, _dirnames, filenames in _walk(root):
            namespace = NAMESPACE_PATH_SEPARATOR.join(relative.parts)
            for filename in filenames:
                if not filename.endswith(COMMAND_EXTENSION):
                    continue
                name = filename[: -len(COMMAND_EXTENSION)]
                if not name:
                    continue
                found.append(
                    DiscoveredResource(
                        name=name,
                        path=directory / filename,
                        source=source,
                        kind=self.kind,
                        namespace=_compose_namespace(source.namespace, namespace),
                    )
                )
        return found


def finder_for_kind(kind: ResourceKind) -> ResourceFinder:
    """Return the built-in finder for ``kind``."""
    if kind == "skill":
        return SkillFinder()
    return CommandFinder()


def _walk(root: Path) -> Iterator[tuple[Path, Path, list[str], list[str]]]:
    """Yield ``(directory, relative, dirnames, filenames)`` in sorted order.

    Missing or unreadable directories contribute nothing. Callers may prune
    ``dirnames`` in place.
    """
    if not root.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        directory = Path(dirpath)
        yield directory, directory.relative_to(root), dirnames, sorted(filenames)


def _log_walk_error(exc: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", exc.filename, exc.strerror or exc)


def _compose_namespace(source_namespace: str, path_namespace: str) -> str:
    return NAMESPACE_PATH_SEPARATOR.join(part for part in (source_namespace, path_namespace) if part)
