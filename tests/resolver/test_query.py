"""Tests for namespace query parsing and candidate ranking helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillet.model import Candidate
from skillet.resolver import match_specificity, parse_namespace_query
from skillet.resolver.query import candidate_sort_key, is_collision


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("test", ("", "test")),
        ("frontend:test", ("frontend", "test")),
        ("a:b:c", ("a", "b:c")),
        (":test", ("", "test")),
        ("frontend:", ("frontend", "")),
        ("backend/db:migrate", ("backend/db", "migrate")),
    ],
)
def test_parse_namespace_query(query: str, expected: tuple[str, str]) -> None:
    assert parse_namespace_query(query) == expected


@pytest.mark.parametrize(
    ("query_ns", "resource_ns", "expected"),
    [
        ("frontend", "frontend", "exact_namespace"),
        ("Frontend", "frontend", "exact_namespace"),
        ("frontend", "backend", None),
        ("frontend", "", None),
        ("", "", "unnamespaced_exact"),
        ("", "frontend", "namespaced_fallback"),
    ],
)
def test_match_specificity(query_ns: str, resource_ns: str, expected: str | None) -> None:
    assert match_specificity(query_ns, resource_ns) == expected


def _candidate(**overrides: object) -> Candidate:
    values: dict[str, object] = {
        "path": Path("/x"),
        "kind": "skill",
        "priority": 0,
        "specificity": "namespaced_fallback",
        "namespace": "frontend",
        "name": "test",
    }
    values.update(overrides)
    return Candidate(**values)  # type: ignore[arg-type]


def test_sort_key_orders_specificity_then_priority_then_kind() -> None:
    ordered = sorted(
        [
            _candidate(specificity="namespaced_fallback", priority=0),
            _candidate(specificity="unnamespaced_exact", priority=1, kind="command", namespace=""),
            _candidate(specificity="unnamespaced_exact", priority=1, kind="skill", namespace=""),
            _candidate(specificity="unnamespaced_exact", priority=0, kind="command", namespace=""),
        ],
        key=candidate_sort_key,
    )

    assert [(c.specificity, c.priority, c.kind) for c in ordered] == [
        ("unnamespaced_exact", 0, "command"),
        ("unnamespaced_exact", 1, "skill"),
        ("unnamespaced_exact", 1, "command"),
        ("namespaced_fallback", 0, "skill"),
    ]


def test_collision_requires_two_different_fallback_namespaces() -> None:
    frontend = _candidate(namespace="frontend")
    backend = _candidate(namespace="backend")
    frontend_command = _candidate(namespace="frontend", kind="command")
    unnamespaced = _candidate(specificity="unnamespaced_exact", namespace="")

    assert is_collision(frontend, backend)
    assert not is_collision(frontend, frontend_command)
    assert not is_collision(unnamespaced, _candidate(specificity="unnamespaced_exact", namespace="", kind="command"))
