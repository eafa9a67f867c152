"""Resource discovery across prioritized sources."""

from .engine import ResourceDiscoverer
from .finders import CommandFinder, ResourceFinder, SkillFinder, finder_for_kind

__all__ = [
    "CommandFinder",
    "ResourceDiscoverer",
    "ResourceFinder",
    "SkillFinder",
    "finder_for_kind",
]
