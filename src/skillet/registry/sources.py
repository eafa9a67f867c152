"""Priority-ordered source registries for skills and commands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from skillet.config import SkilletConfig
from skillet.constants.discovery import (
    CLAUDE_DIR,
    KIND_SUBDIRS,
    PROJECT_SOURCE_NAME,
    PROJECT_SOURCE_PRIORITY,
    USER_SOURCE_NAME,
    USER_SOURCE_PRIORITY,
)
from skillet.model import PluginInstall, Source
from skillet.registry.plugins import load_plugin_installs, plugin_sources
from skillet.types import ResourceKind


@dataclass(frozen=True)
class SourceRegistry:
    """Ordered, immutable list of sources for one resource kind.

    Sources are kept sorted by priority; equal priorities keep their
    construction order.
    """

    sources: tuple[Source, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sources", tuple(sorted(self.sources, key=lambda source: source.priority)))

    @classmethod
    def from_sources(cls, sources: Iterable[Source]) -> SourceRegistry:
        """Build a registry from an explicit list, without probing the filesystem."""
        return cls(tuple(sources))

    @classmethod
    def default(
        cls,
        kind: ResourceKind,
        *,
        work_dir: Path,
        home_dir: Path | None,
        plugins: Iterable[PluginInstall] = (),
    ) -> SourceRegistry:
        """Project source, user source when ``home_dir`` is known, then plugin sources."""
        subdir = KIND_SUBDIRS[kind]
        sources = [
            Source(path=work_dir / CLAUDE_DIR / subdir, name=PROJECT_SOURCE_NAME, priority=PROJECT_SOURCE_PRIORITY),
        ]
        if home_dir is not None:
            sources.append(
                Source(path=home_dir / CLAUDE_DIR / subdir, name=USER_SOURCE_NAME, priority=USER_SOURCE_PRIORITY)
            )
        sources.extend(plugin_sources(list(plugins), kind))
        return cls(tuple(sources))

    def with_sources(self, extra: Iterable[Source]) -> SourceRegistry:
        """Return a new registry with ``extra`` appended."""
        return SourceRegistry((*self.sources, *extra))

    def __iter__(self) -> Iterator[Source]:
        return iter(self.sources)

    def __len__(self) -> int:
        return len(self.sources)


def build_source_registry(
    kind: ResourceKind,
    config: SkilletConfig,
    plugins: list[PluginInstall] | None = None,
) -> SourceRegistry:
    """Build the default registry for ``kind`` from an explicit config.

    When ``plugins`` is omitted the manifest named by the config is read.
    """
    if plugins is None:
        plugins = load_plugin_installs(config.effective_plugin_manifest)
    return SourceRegistry.default(kind, work_dir=config.work_dir, home_dir=config.home_dir, plugins=plugins)
