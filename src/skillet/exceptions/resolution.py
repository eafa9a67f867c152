"""Resolution and fetch exceptions."""

from __future__ import annotations

from skillet.exceptions.base import SkilletError


class ResolutionError(SkilletError, LookupError):
    """Raised when a query cannot be resolved to a single resource."""


class ResourceNotFoundError(ResolutionError):
    """No resource matched the query in any location tried."""

    def __init__(self, query: str, locations: tuple[str, ...]) -> None:
        self.query = query
        self.locations = locations
        message = f"skill or command not found: {query}"
        if locations:
            message = f"{message} (tried {', '.join(locations)})"
        super().__init__(message)


class AmbiguousResourceError(ResolutionError):
    """Two namespaced fallbacks tied for the same bare-name query."""

    def __init__(self, query: str, name: str, first: str, second: str) -> None:
        self.query = query
        self.candidates = (first, second)
        first_ns = first.rsplit(":", 1)[0]
        second_ns = second.rsplit(":", 1)[0]
        super().__init__(
            f"ambiguous match for {query!r}: found both {first} and {second} at same priority. "
            f"Use explicit namespace (e.g., {first_ns}:{name} or {second_ns}:{name})"
        )


class ResourceFetchError(SkilletError):
    """Raised when a URL resource cannot be downloaded or is not acceptable text."""
