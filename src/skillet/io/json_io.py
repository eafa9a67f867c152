"""JSON read and temp-file spooling helpers."""

from __future__ import annotations

import json
import tempfile
from contextlib import suppress
from pathlib import Path


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def spool_temp_file(*, content: bytes, temp_prefix: str, temp_suffix: str) -> Path:
    """Write ``content`` to a new temp file that outlives this call; the caller removes it."""
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    return Path(temp_name)
