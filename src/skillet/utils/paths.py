"""Display helpers for filesystem paths."""

from __future__ import annotations

from pathlib import Path


def relative_display_path(path: Path, *, work_dir: Path | None = None, home_dir: Path | None = None) -> str:
    """Shorten ``path`` for display: ``./...`` under the working directory, ``~/...`` under home."""
    if work_dir is not None and path.is_relative_to(work_dir):
        return f"./{path.relative_to(work_dir).as_posix()}"
    if home_dir is not None and path.is_relative_to(home_dir):
        return f"~/{path.relative_to(home_dir).as_posix()}"
    return str(path)
