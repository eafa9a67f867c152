"""Constants for source layout and resource discovery."""

from __future__ import annotations

CLAUDE_DIR: str = ".claude"
SKILLS_DIR: str = "skills"
COMMANDS_DIR: str = "commands"

SKILL_MARKER_FILENAME: str = "SKILL.md"
COMMAND_EXTENSION: str = ".md"

PROJECT_SOURCE_NAME: str = "project"
USER_SOURCE_NAME: str = "user"
PLUGIN_SOURCE_PREFIX: str = "plugin:"

PROJECT_SOURCE_PRIORITY: int = 0
USER_SOURCE_PRIORITY: int = 1
PLUGIN_START_PRIORITY: int = 2

# Skills live at most one namespace level deep: <source>/<ns>/<name>/SKILL.md
MAX_SKILL_DIR_DEPTH: int = 2

NAMESPACE_SEPARATOR: str = ":"
NAMESPACE_PATH_SEPARATOR: str = "/"

KIND_SUBDIRS: dict[str, str] = {"skill": SKILLS_DIR, "command": COMMANDS_DIR}
