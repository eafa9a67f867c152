"""Frozen dataclasses shared across registry, discovery, and resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillet.constants.discovery import NAMESPACE_SEPARATOR
from skillet.types import JsonObject, MatchSpecificity, ResourceKind


def qualify(namespace: str, name: str) -> str:
    """Return ``namespace:name``, or bare ``name`` when there is no namespace."""
    if namespace:
        return f"{namespace}{NAMESPACE_SEPARATOR}{name}"
    return name


@dataclass(frozen=True)
class Source:
    """A directory that may contain resources of one kind."""

    path: Path
    name: str
    priority: int
    namespace: str = ""


@dataclass(frozen=True)
class PluginInstall:
    """One installation of a plugin, as recorded in the plugins manifest."""

    name: str
    full_name: str
    install_path: Path
    scope: str = ""
    version: str = ""


@dataclass(frozen=True)
class DiscoveredResource:
    """A skill or command file found in a source."""

    name: str
    path: Path
    source: Source
    kind: ResourceKind
    namespace: str = ""
    overshadowed: bool = False
    overshadowed_by: Path | None = None

    @property
    def qualified_name(self) -> str:
        return qualify(self.namespace, self.name)

    def to_dict(self) -> JsonObject:
        """Serialize for JSON/YAML listings."""
        return {
            "name": self.name,
            "qualified_name": self.qualified_name,
            "kind": self.kind,
            "namespace": self.namespace,
            "path": str(self.path),
            "source": self.source.name,
            "priority": self.source.priority,
            "overshadowed": self.overshadowed,
            "overshadowed_by": str(self.overshadowed_by) if self.overshadowed_by else None,
        }


@dataclass(frozen=True)
class Candidate:
    """A resolution candidate, alive only for one resolve call."""

    path: Path
    kind: ResourceKind
    priority: int
    specificity: MatchSpecificity
    namespace: str
    name: str

    @property
    def qualified_name(self) -> str:
        return qualify(self.namespace, self.name)


@dataclass(frozen=True)
class ResolveResult:
    """The single file a query resolved to."""

    path: Path
    kind: ResourceKind
    is_url: bool = False
    base_url: str = ""

    def to_dict(self) -> JsonObject:
        payload: JsonObject = {"path": str(self.path), "kind": self.kind, "is_url": self.is_url}
        if self.base_url:
            payload["base_url"] = self.base_url
        return payload
