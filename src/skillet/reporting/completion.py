"""Qualified-name completion for shells and editors."""

from __future__ import annotations

from skillet.resolver import Resolver


def complete_names(resolver: Resolver, prefix: str = "") -> list[str]:
    """Sorted qualified names of every winning skill and command starting with ``prefix``.

    Overshadowed copies are left out. A name defined as both a skill and a
    command appears once per kind.
    """
    names = [
        resource.qualified_name
        for discoverer in (resolver.skills, resolver.commands)
        for resource in discoverer.discover()
        if not resource.overshadowed and resource.qualified_name.startswith(prefix)
    ]
    return sorted(names)
