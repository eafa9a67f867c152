"""Human-readable listings of discovered skills and commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillet.constants.discovery import NAMESPACE_PATH_SEPARATOR
from skillet.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RESET,
    ANSI_STRIKE,
    ANSI_YELLOW,
    LIST_TITLE,
    OVERSHADOWED_LABEL,
    SECTION_TITLES,
)
from skillet.model import DiscoveredResource, Source
from skillet.resolver import Resolver
from skillet.types import ResourceKind
from skillet.utils import relative_display_path


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def source_label(resource: DiscoveredResource) -> str:
    """``source`` or ``source:namespace``, without repeating a plugin's own name."""
    namespace = resource.namespace
    prefix = resource.source.namespace
    if prefix:
        if namespace == prefix:
            namespace = ""
        elif namespace.startswith(f"{prefix}{NAMESPACE_PATH_SEPARATOR}"):
            namespace = namespace[len(prefix) + len(NAMESPACE_PATH_SEPARATOR) :]
    if namespace:
        return f"{resource.source.name}:{namespace}"
    return resource.source.name


@dataclass(frozen=True)
class Listing:
    """Snapshot of one discovery pass over both kinds."""

    skills: tuple[DiscoveredResource, ...]
    commands: tuple[DiscoveredResource, ...]
    skill_sources: tuple[Source, ...]
    command_sources: tuple[Source, ...]

    def resources(self, kind: ResourceKind) -> tuple[DiscoveredResource, ...]:
        return self.skills if kind == "skill" else self.commands

    def sources(self, kind: ResourceKind) -> tuple[Source, ...]:
        return self.skill_sources if kind == "skill" else self.command_sources


def build_listing(resolver: Resolver) -> Listing:
    """Run discovery for both kinds."""
    return Listing(
        skills=tuple(resolver.skills.discover()),
        commands=tuple(resolver.commands.discover()),
        skill_sources=resolver.skills.registry.sources,
        command_sources=resolver.commands.registry.sources,
    )


class ListingReporter:
    """Formats a listing as aligned terminal output."""

    def __init__(
        self,
        listing: Listing,
        *,
        color: bool = True,
        work_dir: Path | None = None,
        home_dir: Path | None = None,
    ) -> None:
        self._listing = listing
        self._color = color
        self._work_dir = work_dir
        self._home_dir = home_dir

    def render(self) -> str:
        lines = [self._style(LIST_TITLE, ANSI_BOLD + ANSI_CYAN), ""]
        lines.extend(self._render_section("skill"))
        lines.append("")
        lines.extend(self._render_section("command"))
        return "\n".join(lines)

    def _render_section(self, kind: ResourceKind) -> list[str]:
        title = SECTION_TITLES[kind]
        lines = [self._style(title, ANSI_BOLD + ANSI_YELLOW)]
        resources = self._listing.resources(kind)
        if not resources:
            lines.append(self._style(f"  No {title.lower()} found.", ANSI_DIM))
            lines.append("")
            lines.append(f"  {title} are looked for in:")
            for source in self._listing.sources(kind):
                lines.append(f"    • {source.path} ({source.name})")
            return lines

        width = max(len(self._raw_label(resource)) for resource in resources)
        for resource in resources:
            padding = " " * (width - len(self._raw_label(resource)))
            label = self._style(f"({source_label(resource)})", ANSI_DIM)
            path = relative_display_path(resource.path, work_dir=self._work_dir, home_dir=self._home_dir)
            if resource.overshadowed:
                name = self._style(resource.name, ANSI_DIM + ANSI_STRIKE)
                marker = self._style(f" {OVERSHADOWED_LABEL}", ANSI_DIM)
                lines.append(f"  {name} {label}{padding}  {self._style(path, ANSI_DIM)}{marker}")
            else:
                name = self._style(resource.name, ANSI_BOLD + ANSI_GREEN)
                lines.append(f"  {name} {label}{padding}  {self._style(path, ANSI_DIM)}")
        return lines

    @staticmethod
    def _raw_label(resource: DiscoveredResource) -> str:
        return f"{resource.name} ({source_label(resource)})"

    def _style(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text


def render_which(
    name: str,
    matches: list[DiscoveredResource],
    *,
    work_dir: Path | None = None,
    home_dir: Path | None = None,
) -> str:
    """One line per version of ``name``, winners first within each source."""
    if not matches:
        return f"No skill or command named {name!r} found."

    def display(path: Path) -> str:
        return relative_display_path(path, work_dir=work_dir, home_dir=home_dir)

    lines: list[str] = []
    for resource in matches:
        line = f"{resource.kind:<8} {resource.qualified_name}  {display(resource.path)}  ({resource.source.name})"
        if resource.overshadowed and resource.overshadowed_by is not None:
            line = f"{line}  overshadowed by {display(resource.overshadowed_by)}"
        lines.append(line)
    return "\n".join(lines)
