"""Core data models for Skillet."""

from .entities import Candidate, DiscoveredResource, PluginInstall, ResolveResult, Source, qualify

__all__ = [
    "Candidate",
    "DiscoveredResource",
    "PluginInstall",
    "ResolveResult",
    "Source",
    "qualify",
]
