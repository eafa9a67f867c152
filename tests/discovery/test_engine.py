"""Tests for cross-source merging, overshadowing, and ordering."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from skillet.config import SkilletConfig
from skillet.discovery import ResourceDiscoverer, SkillFinder
from skillet.model import DiscoveredResource, Source
from skillet.registry import SourceRegistry, build_source_registry


def _registry(*paths: Path) -> SourceRegistry:
    names = ["project", "user", "extra"]
    return SourceRegistry.from_sources(
        Source(path=path, name=names[index], priority=index) for index, path in enumerate(paths)
    )


def test_project_skill_overshadows_user_skill(
    work_dir: Path, home_dir: Path, write_skill: Callable[..., Path]
) -> None:
    project = write_skill(work_dir / ".claude" / "skills", "common-skill")
    user = write_skill(home_dir / ".claude" / "skills", "common-skill")
    registry = SourceRegistry.default("skill", work_dir=work_dir, home_dir=home_dir)

    found = ResourceDiscoverer.for_kind("skill", registry).discover()

    assert [(r.path, r.overshadowed, r.overshadowed_by) for r in found] == [
        (project, False, None),
        (user, True, project),
    ]


def test_every_loser_points_at_the_single_winner(tmp_path: Path, write_command: Callable[..., Path]) -> None:
    roots = [tmp_path / "p0", tmp_path / "p1", tmp_path / "p2"]
    paths = [write_command(root, "deploy", namespace="ops") for root in roots]

    found = ResourceDiscoverer.for_kind("command", _registry(*roots)).discover()

    winners = [r for r in found if not r.overshadowed]
    assert [r.path for r in winners] == [paths[0]]
    assert [r.overshadowed_by for r in found if r.overshadowed] == [paths[0], paths[0]]


def test_same_name_in_different_namespaces_is_not_overshadowed(
    tmp_path: Path, write_skill: Callable[..., Path]
) -> None:
    write_skill(tmp_path / "p0", "test", namespace="frontend")
    write_skill(tmp_path / "p1", "test", namespace="backend")
    write_skill(tmp_path / "p1", "test")

    found = ResourceDiscoverer.for_kind("skill", _registry(tmp_path / "p0", tmp_path / "p1")).discover()

    assert not any(r.overshadowed for r in found)


def test_results_sorted_by_priority_namespace_name(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    write_skill(tmp_path / "p1", "alpha")
    write_skill(tmp_path / "p0", "zeta")
    write_skill(tmp_path / "p0", "beta", namespace="ns")
    write_skill(tmp_path / "p0", "alpha", namespace="ns")
    write_skill(tmp_path / "p0", "gamma")

    found = ResourceDiscoverer.for_kind("skill", _registry(tmp_path / "p0", tmp_path / "p1")).discover()

    assert [(r.source.priority, r.qualified_name) for r in found] == [
        (0, "gamma"),
        (0, "zeta"),
        (0, "ns:alpha"),
        (0, "ns:beta"),
        (1, "alpha"),
    ]


def test_overshadowing_follows_priority_not_registration_order(
    tmp_path: Path, write_skill: Callable[..., Path]
) -> None:
    high = write_skill(tmp_path / "high", "shared")
    low = write_skill(tmp_path / "low", "shared")
    registry = SourceRegistry.from_sources(
        [
            Source(path=tmp_path / "low", name="low", priority=5),
            Source(path=tmp_path / "high", name="high", priority=0),
        ]
    )

    found = ResourceDiscoverer.for_kind("skill", registry).discover()

    assert [(r.path, r.overshadowed) for r in found] == [(high, False), (low, True)]


def test_discover_by_name_returns_all_versions(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    write_skill(tmp_path / "p0", "Review")
    write_skill(tmp_path / "p1", "review")
    write_skill(tmp_path / "p1", "review", namespace="team")
    write_skill(tmp_path / "p1", "other")

    matches = ResourceDiscoverer.for_kind("skill", _registry(tmp_path / "p0", tmp_path / "p1")).discover_by_name(
        "review"
    )

    assert [r.qualified_name for r in matches] == ["Review", "review", "team:review"]


def test_missing_sources_contribute_nothing(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    write_skill(tmp_path / "p1", "only")

    found = ResourceDiscoverer.for_kind("skill", _registry(tmp_path / "missing", tmp_path / "p1")).discover()

    assert [r.name for r in found] == ["only"]


class _ExplodingFinder(SkillFinder):
    def find(self, source: Source) -> list[DiscoveredResource]:
        if source.name == "project":
            raise PermissionError("denied")
        return super().find(source)


def test_finder_os_error_skips_only_that_source(tmp_path: Path, write_skill: Callable[..., Path]) -> None:
    write_skill(tmp_path / "p0", "lost")
    write_skill(tmp_path / "p1", "kept")

    discoverer = ResourceDiscoverer(_registry(tmp_path / "p0", tmp_path / "p1"), _ExplodingFinder())

    assert [r.name for r in discoverer.discover()] == ["kept"]
    assert discoverer.kind == "skill"


def test_plugin_installed_in_two_scopes_overshadows_itself(
    tmp_path: Path, work_dir: Path, home_dir: Path, write_skill: Callable[..., Path]
) -> None:
    first = write_skill(tmp_path / "beads-user" / "skills", "wf")
    write_skill(tmp_path / "beads-project" / "skills", "wf")
    manifest = tmp_path / "installed_plugins.json"
    manifest.write_text(
        json.dumps(
            {
                "plugins": {
                    "beads@m": [
                        {"scope": "user", "installPath": str(tmp_path / "beads-user")},
                        {"scope": "project", "installPath": str(tmp_path / "beads-project")},
                    ]
                }
            }
        ),
        encoding="utf-8",
    )
    config = SkilletConfig(work_dir=work_dir, home_dir=home_dir, plugin_manifest=manifest)

    found = ResourceDiscoverer.for_kind("skill", build_source_registry("skill", config)).discover()

    assert [(r.qualified_name, r.source.priority, r.overshadowed) for r in found] == [
        ("beads:wf", 2, False),
        ("beads:wf", 3, True),
    ]
    assert found[1].overshadowed_by == first
