"""Download a remote skill or command and spool it to a temp file."""

from __future__ import annotations

import logging
import posixpath
from urllib.parse import urlparse

import httpx

from skillet.constants.discovery import COMMAND_EXTENSION, SKILL_MARKER_FILENAME
from skillet.constants.resolution import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_URL_MAX_BYTES,
    MIN_PRINTABLE_RATIO,
    TEXT_CONTENT_TYPE_PREFIX,
    TEXT_CONTENT_TYPES,
    URL_TEMP_PREFIX,
    URL_TEMP_SUFFIX,
)
from skillet.exceptions import ResourceFetchError
from skillet.io import spool_temp_file
from skillet.model import ResolveResult
from skillet.types import ResourceKind

logger = logging.getLogger(__name__)

_PRINTABLE_CONTROL_BYTES: frozenset[int] = frozenset(b"\n\r\t")


def fetch_url(
    url: str,
    *,
    max_bytes: int = DEFAULT_URL_MAX_BYTES,
    timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> ResolveResult:
    """Download ``url``, validate that it is small text, and spool it to disk.

    The returned result points at the temp file; the caller owns and removes
    it. ``base_url`` is the URL's directory, for resolving relative references
    in the fetched content.
    """
    parsed = urlparse(url)
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout_seconds, follow_redirects=True)

    try:
        with client.stream("GET", url) as response:
            if response.status_code != httpx.codes.OK:
                raise ResourceFetchError(f"failed to download URL: HTTP {response.status_code}")
            content_type = response.headers.get("content-type", "")
            if content_type and not is_text_content_type(content_type):
                raise ResourceFetchError(f"URL must point to a text file, got Content-Type: {content_type}")
            content = _read_limited(response, max_bytes + 1)
    except httpx.HTTPError as exc:
        raise ResourceFetchError(f"failed to download URL: {exc}") from exc
    finally:
        if owns_client:
            client.close()

    if len(content) > max_bytes:
        raise ResourceFetchError(f"URL content too large: exceeds {max_bytes} bytes")
    if not content:
        raise ResourceFetchError("URL content is empty")
    if not is_text_content(content):
        raise ResourceFetchError("URL content appears to be binary, not text")

    try:
        spooled = spool_temp_file(content=content, temp_prefix=URL_TEMP_PREFIX, temp_suffix=URL_TEMP_SUFFIX)
    except OSError as exc:
        raise ResourceFetchError(f"failed to write temporary file: {exc}") from exc

    logger.debug("Fetched %d bytes from %s into %s", len(content), url, spooled)
    return ResolveResult(
        path=spooled,
        kind=_classify_url_path(parsed.path),
        is_url=True,
        base_url=f"{parsed.scheme}://{parsed.netloc}{posixpath.dirname(parsed.path) or '/'}",
    )


def is_text_content_type(content_type: str) -> bool:
    """Accept ``text/*`` and the JSON/YAML application types, ignoring parameters."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type.startswith(TEXT_CONTENT_TYPE_PREFIX) or media_type in TEXT_CONTENT_TYPES


def is_text_content(content: bytes) -> bool:
    """Heuristic binary sniff: no NUL bytes and mostly printable ASCII."""
    if not content or b"\x00" in content:
        return False
    printable = sum(1 for byte in content if 32 <= byte < 127 or byte in _PRINTABLE_CONTROL_BYTES)
    return printable / len(content) >= MIN_PRINTABLE_RATIO


def _read_limited(response: httpx.Response, limit: int) -> bytes:
    buffer = bytearray()
    for chunk in response.iter_bytes():
        buffer.extend(chunk)
        if len(buffer) >= limit:
            break
    return bytes(buffer[:limit])


def _classify_url_path(url_path: str) -> ResourceKind:
    """URLs default to skills; a ``.md`` file that is not the skill marker is a command."""
    lowered = url_path.lower()
    if lowered.endswith(COMMAND_EXTENSION) and not lowered.endswith(f"/{SKILL_MARKER_FILENAME.lower()}"):
        return "command"
    return "skill"
