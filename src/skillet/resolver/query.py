"""Query parsing and match scoring."""

from __future__ import annotations

from skillet.constants.discovery import NAMESPACE_SEPARATOR
from skillet.constants.resolution import RESOURCE_KIND_RANK, SPECIFICITY_RANK
from skillet.model import Candidate
from skillet.types import MatchSpecificity


def parse_namespace_query(query: str) -> tuple[str, str]:
    """Split ``"frontend:test"`` into ``("frontend", "test")``; ``"test"`` into ``("", "test")``."""
    namespace, separator, name = query.partition(NAMESPACE_SEPARATOR)
    if not separator:
        return "", query
    return namespace, name


def match_specificity(query_namespace: str, resource_namespace: str) -> MatchSpecificity | None:
    """Classify how a resource's namespace matches the query's.

    Returns ``None`` when the query names a namespace and the resource is not
    in it; such resources are never candidates, not even as fallbacks.
    """
    if query_namespace:
        if resource_namespace.casefold() == query_namespace.casefold():
            return "exact_namespace"
        return None
    if not resource_namespace:
        return "unnamespaced_exact"
    return "namespaced_fallback"


def candidate_sort_key(candidate: Candidate) -> tuple[int, int, int]:
    """Specificity, then source priority, then skills before commands."""
    return (
        SPECIFICITY_RANK[candidate.specificity],
        candidate.priority,
        RESOURCE_KIND_RANK[candidate.kind],
    )


def is_collision(best: Candidate, other: Candidate) -> bool:
    """Whether ``other`` ties ``best`` as a different namespaced fallback."""
    return (
        best.specificity == "namespaced_fallback"
        and other.specificity == "namespaced_fallback"
        and best.namespace.casefold() != other.namespace.casefold()
    )
