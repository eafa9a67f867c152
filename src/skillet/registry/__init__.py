"""Source registries and the plugin source loader."""

from .plugins import load_plugin_installs, plugin_name_from_key, plugin_sources
from .sources import SourceRegistry, build_source_registry

__all__ = [
    "SourceRegistry",
    "build_source_registry",
    "load_plugin_installs",
    "plugin_name_from_key",
    "plugin_sources",
]
