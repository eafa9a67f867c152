"""Shared pytest fixtures for hermetic project/home trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from skillet.config import SkilletConfig


@pytest.fixture()
def work_dir(tmp_path: Path) -> Path:
    """Project directory; its ``.claude/`` is the priority-0 source."""
    path = (tmp_path / "project").resolve()
    path.mkdir()
    return path


@pytest.fixture()
def home_dir(tmp_path: Path) -> Path:
    """Home directory; its ``.claude/`` is the priority-1 source."""
    path = (tmp_path / "home").resolve()
    path.mkdir()
    return path


@pytest.fixture()
def config(work_dir: Path, home_dir: Path) -> SkilletConfig:
    return SkilletConfig(work_dir=work_dir, home_dir=home_dir)


@pytest.fixture()
def write_skill() -> Callable[..., Path]:
    """Return a helper that creates ``<root>/[<namespace>/]<name>/SKILL.md``."""

    def _write(root: Path, name: str, namespace: str = "", body: str = "# Skill\n") -> Path:
        folder = root / namespace / name if namespace else root / name
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / "SKILL.md"
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_command() -> Callable[..., Path]:
    """Return a helper that creates ``<root>/[<namespace>/]<name>.md``."""

    def _write(root: Path, name: str, namespace: str = "", body: str = "Run $ARGUMENTS\n") -> Path:
        folder = root / namespace if namespace else root
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{name}.md"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
