"""Constants for match ranking and the URL fast path."""

from __future__ import annotations

# Lower rank wins.
RESOURCE_KIND_RANK: dict[str, int] = {"skill": 0, "command": 1}
SPECIFICITY_RANK: dict[str, int] = {
    "exact_namespace": 0,
    "unnamespaced_exact": 1,
    "namespaced_fallback": 2,
}

URL_SCHEMES: frozenset[str] = frozenset({"http", "https"})
DEFAULT_URL_MAX_BYTES: int = 25 * 1024
DEFAULT_FETCH_TIMEOUT_SECONDS: float = 10.0
URL_TEMP_PREFIX: str = "skillet-url-"
URL_TEMP_SUFFIX: str = ".md"

TEXT_CONTENT_TYPE_PREFIX: str = "text/"
TEXT_CONTENT_TYPES: frozenset[str] = frozenset(
    {"application/json", "application/x-yaml", "application/yaml"}
)
MIN_PRINTABLE_RATIO: float = 0.95
