"""Tests for ambient configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillet.config import SkilletConfig, load_config
from skillet.exceptions import ConfigError


def test_load_config_defaults_to_process_state(
    tmp_path: Path, home_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(home_dir))

    config = load_config()

    assert config.work_dir == tmp_path.resolve()
    assert config.home_dir == home_dir
    assert config.effective_plugin_manifest == home_dir / ".claude" / "plugins" / "installed_plugins.json"


def test_load_config_without_home(work_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(_no_home))

    config = load_config(work_dir)

    assert config.home_dir is None
    assert config.effective_plugin_manifest is None


def test_explicit_manifest_wins(work_dir: Path, home_dir: Path, tmp_path: Path) -> None:
    config = SkilletConfig(work_dir=work_dir, home_dir=home_dir, plugin_manifest=tmp_path / "m.json")

    assert config.effective_plugin_manifest == tmp_path / "m.json"


def test_load_config_rejects_missing_work_dir(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Working directory not found"):
        load_config(tmp_path / "missing")


@pytest.mark.parametrize("bad_value", [0, -1, True])
def test_load_config_rejects_bad_url_limit(work_dir: Path, bad_value: int) -> None:
    with pytest.raises(ConfigError, match="url_max_bytes"):
        load_config(work_dir, url_max_bytes=bad_value)


def test_load_config_rejects_bad_timeout(work_dir: Path) -> None:
    with pytest.raises(ConfigError, match="fetch_timeout_seconds"):
        load_config(work_dir, fetch_timeout_seconds=0)
