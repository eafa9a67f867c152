"""JSON and YAML renderings of listings."""

from __future__ import annotations

import json

import yaml

from skillet.model import DiscoveredResource, Source
from skillet.reporting.listing import Listing
from skillet.types import JsonObject


def _source_payload(source: Source) -> JsonObject:
    return {
        "name": source.name,
        "path": str(source.path),
        "priority": source.priority,
        "namespace": source.namespace,
    }


def listing_payload(listing: Listing) -> JsonObject:
    """Machine-readable form of a listing."""
    return {
        "skills": [resource.to_dict() for resource in listing.skills],
        "commands": [resource.to_dict() for resource in listing.commands],
        "sources": {
            "skills": [_source_payload(source) for source in listing.skill_sources],
            "commands": [_source_payload(source) for source in listing.command_sources],
        },
    }


def resources_payload(resources: list[DiscoveredResource]) -> list[JsonObject]:
    return [resource.to_dict() for resource in resources]


def render_payload(payload: object, output_format: str) -> str:
    """Render ``payload`` as ``json`` or ``yaml``."""
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False).rstrip("\n")
    return json.dumps(payload, indent=2)
