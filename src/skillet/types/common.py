"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

ResourceKind: TypeAlias = Literal["skill", "command"]
MatchSpecificity: TypeAlias = Literal["exact_namespace", "unnamespaced_exact", "namespaced_fallback"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
