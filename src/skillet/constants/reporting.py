"""Constants for listing output and terminal colors."""

from __future__ import annotations

VALID_LIST_FORMATS: frozenset[str] = frozenset({"text", "json", "yaml"})
DEFAULT_LIST_FORMAT: str = "text"

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"
ANSI_DIM: str = "\033[90m"
ANSI_STRIKE: str = "\033[9m"

LIST_TITLE: str = "Available Skills and Commands"
SECTION_TITLES: dict[str, str] = {"skill": "Skills", "command": "Commands"}
OVERSHADOWED_LABEL: str = "(overshadowed)"
