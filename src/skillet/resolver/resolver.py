"""Resolve a user query to exactly one skill or command file."""

from __future__ import annotations

import logging

import httpx

from skillet.config import SkilletConfig, load_config
from skillet.constants.discovery import COMMAND_EXTENSION, SKILL_MARKER_FILENAME
from skillet.constants.resolution import DEFAULT_FETCH_TIMEOUT_SECONDS, DEFAULT_URL_MAX_BYTES
from skillet.discovery import ResourceDiscoverer
from skillet.exceptions import AmbiguousResourceError, ResourceNotFoundError
from skillet.model import Candidate, ResolveResult
from skillet.registry import SourceRegistry, build_source_registry, load_plugin_installs
from skillet.resolver.fastpath import is_url, probe_local_path
from skillet.resolver.fetch import fetch_url
from skillet.resolver.query import candidate_sort_key, is_collision, match_specificity, parse_namespace_query

logger = logging.getLogger(__name__)

_PATH_SEPARATORS: tuple[str, ...] = ("/", "\\")


class Resolver:
    """Namespace-aware resolver over a skill registry and a command registry.

    Resolution order:

    1. ``http(s)://`` URLs are downloaded and spooled to a temp file.
    2. An existing file is used as-is; an existing directory is used when it
       contains ``SKILL.md``.
    3. Otherwise the query is split into ``namespace:name`` and matched against
       every non-overshadowed skill and command. Candidates rank by
       specificity, then source priority, then skills before commands. Two
       different namespaced fallbacks tied at the best rank are ambiguous.

    Discovery runs afresh on every call; nothing is cached between calls.
    """

    def __init__(
        self,
        skill_registry: SourceRegistry,
        command_registry: SourceRegistry,
        *,
        url_max_bytes: int = DEFAULT_URL_MAX_BYTES,
        fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._skills = ResourceDiscoverer.for_kind("skill", skill_registry)
        self._commands = ResourceDiscoverer.for_kind("command", command_registry)
        self._url_max_bytes = url_max_bytes
        self._fetch_timeout_seconds = fetch_timeout_seconds
        self._http_client = http_client

    @classmethod
    def from_config(cls, config: SkilletConfig, *, http_client: httpx.Client | None = None) -> Resolver:
        """Build the default project/user/plugin registries described by ``config``."""
        plugins = load_plugin_installs(config.effective_plugin_manifest)
        return cls(
            build_source_registry("skill", config, plugins),
            build_source_registry("command", config, plugins),
            url_max_bytes=config.url_max_bytes,
            fetch_timeout_seconds=config.fetch_timeout_seconds,
            http_client=http_client,
        )

    @property
    def skills(self) -> ResourceDiscoverer:
        return self._skills

    @property
    def commands(self) -> ResourceDiscoverer:
        return self._commands

    def resolve(self, query: str) -> ResolveResult:
        """Resolve ``query`` to one file.

        Raises:
            ResourceNotFoundError: Nothing matched.
            AmbiguousResourceError: Two namespaced fallbacks tied.
            ResourceFetchError: A URL query could not be fetched.
            OSError: A filesystem probe failed for a reason other than absence.
        """
        if not query.strip():
            raise ResourceNotFoundError(query, ())

        if is_url(query):
            return fetch_url(
                query,
                max_bytes=self._url_max_bytes,
                timeout_seconds=self._fetch_timeout_seconds,
                client=self._http_client,
            )

        local = probe_local_path(query)
        if local is not None:
            return local

        query_namespace, query_name = parse_namespace_query(query)
        if not query_name or any(separator in query_name for separator in _PATH_SEPARATORS):
            raise ResourceNotFoundError(query, self._tried_locations(query_name))
        return self._resolve_by_name(query, query_namespace, query_name)

    def _resolve_by_name(self, query: str, query_namespace: str, query_name: str) -> ResolveResult:
        candidates = self._collect_candidates(query_namespace, query_name)
        if not candidates:
            raise ResourceNotFoundError(query, self._tried_locations(query_name))

        candidates.sort(key=candidate_sort_key)
        best = candidates[0]
        for other in candidates[1:]:
            if (other.specificity, other.priority) != (best.specificity, best.priority):
                break
            if is_collision(best, other):
                raise AmbiguousResourceError(query, query_name, best.qualified_name, other.qualified_name)

        logger.debug(
            "Resolved %r to %s %s (%s, priority %d)",
            query,
            best.kind,
            best.qualified_name,
            best.specificity,
            best.priority,
        )
        return ResolveResult(path=best.path, kind=best.kind)

    def _collect_candidates(self, query_namespace: str, query_name: str) -> list[Candidate]:
        wanted = query_name.casefold()
        candidates: list[Candidate] = []
        for discoverer in (self._skills, self._commands):
            for resource in discoverer.discover():
                if resource.overshadowed or resource.name.casefold() != wanted:
                    continue
                specificity = match_specificity(query_namespace, resource.namespace)
                if specificity is None:
                    continue
                candidates.append(
                    Candidate(
                        path=resource.path,
                        kind=resource.kind,
                        priority=resource.source.priority,
                        specificity=specificity,
                        namespace=resource.namespace,
                        name=resource.name,
                    )
                )
        return candidates

    def _tried_locations(self, name: str) -> tuple[str, ...]:
        label = name or "<name>"
        locations = ["exact path", f"directory with {SKILL_MARKER_FILENAME}"]
        for source in self._skills.registry:
            locations.append(f"{source.path / label / SKILL_MARKER_FILENAME} ({source.name})")
        for source in self._commands.registry:
            locations.append(f"{source.path / (label + COMMAND_EXTENSION)} ({source.name})")
        return tuple(locations)


def resolve(query: str, config: SkilletConfig | None = None) -> ResolveResult:
    """Convenience wrapper: build a fresh default resolver and resolve ``query``."""
    return Resolver.from_config(config or load_config()).resolve(query)
