"""Merge per-source finds into one precedence-ordered resource list."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from skillet.discovery.finders import ResourceFinder, finder_for_kind
from skillet.model import DiscoveredResource
from skillet.registry import SourceRegistry
from skillet.types import ResourceKind

logger = logging.getLogger(__name__)


class ResourceDiscoverer:
    """Discovers every resource of one kind across a source registry."""

    def __init__(self, registry: SourceRegistry, finder: ResourceFinder) -> None:
        self._registry = registry
        self._finder = finder

    @classmethod
    def for_kind(cls, kind: ResourceKind, registry: SourceRegistry) -> ResourceDiscoverer:
        return cls(registry, finder_for_kind(kind))

    @property
    def kind(self) -> ResourceKind:
        return self._finder.kind

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    def discover(self) -> list[DiscoveredResource]:
        """Return all resources, with non-winning duplicates marked overshadowed.

        Sources are visited in priority order and the first source to provide
        a qualified name wins it; every later occurrence points directly at
        that winner. The result is sorted by (priority, namespace, name).
        """
        winners: dict[str, Path] = {}
        merged: list[DiscoveredResource] = []

        for source in self._registry:
            try:
                found = self._finder.find(source)
            except OSError as exc:
                logger.debug("Skipping source %s (%s): %s", source.name, source.path, exc)
                continue

            for resource in found:
                key = resource.qualified_name
                winner = winners.get(key)
                if winner is None:
                    winners[key] = resource.path
                else:
                    resource = replace(resource, overshadowed=True, overshadowed_by=winner)
                merged.append(resource)

        merged.sort(key=lambda resource: (resource.source.priority, resource.namespace, resource.name))
        logger.debug("Discovered %d %s resource(s) in %d source(s)", len(merged), self.kind, len(self._registry))
        return merged

    def discover_by_name(self, name: str) -> list[DiscoveredResource]:
        """Return every version of ``name`` (case-insensitive), overshadowed ones included."""
        wanted = name.casefold()
        return [resource for resource in self.discover() if resource.name.casefold() == wanted]
