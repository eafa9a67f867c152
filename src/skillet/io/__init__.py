"""Shared file I/O helpers."""

from .json_io import load_json_file, spool_temp_file

__all__ = ["load_json_file", "spool_temp_file"]
