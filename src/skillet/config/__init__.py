"""Ambient configuration for discovery and resolution."""

from .loader import load_config
from .model import SkilletConfig

__all__ = ["SkilletConfig", "load_config"]
