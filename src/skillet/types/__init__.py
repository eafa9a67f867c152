"""Shared type aliases for Skillet."""

from .common import JsonObject, JsonScalar, JsonValue, MatchSpecificity, ResourceKind

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "MatchSpecificity",
    "ResourceKind",
]
