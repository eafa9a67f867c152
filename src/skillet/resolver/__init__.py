"""Namespace-aware resolution of a query to one skill or command."""

from .fastpath import classify_path, is_url, probe_local_path
from .fetch import fetch_url, is_text_content, is_text_content_type
from .query import match_specificity, parse_namespace_query
from .resolver import Resolver, resolve

__all__ = [
    "Resolver",
    "classify_path",
    "fetch_url",
    "is_text_content",
    "is_text_content_type",
    "is_url",
    "match_specificity",
    "parse_namespace_query",
    "probe_local_path",
    "resolve",
]
