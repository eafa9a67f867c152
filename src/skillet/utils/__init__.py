"""Small shared helpers."""

from .paths import relative_display_path

__all__ = ["relative_display_path"]
