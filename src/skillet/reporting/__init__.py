"""Renderers for listings and lookups."""

from .completion import complete_names
from .listing import Listing, ListingReporter, build_listing, render_which
from .serialize import listing_payload, render_payload, resources_payload

__all__ = [
    "Listing",
    "ListingReporter",
    "build_listing",
    "complete_names",
    "listing_payload",
    "render_payload",
    "render_which",
    "resources_payload",
]
