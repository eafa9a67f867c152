"""CLI entrypoint for Skillet."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from skillet import __version__
from skillet.config import SkilletConfig, load_config
from skillet.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from skillet.constants.reporting import DEFAULT_LIST_FORMAT, VALID_LIST_FORMATS
from skillet.exceptions import ConfigError, PluginManifestError, SkilletError
from skillet.reporting import (
    ListingReporter,
    build_listing,
    complete_names,
    listing_payload,
    render_payload,
    render_which,
    resources_payload,
)
from skillet.resolver import Resolver


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-C",
        "--work-dir",
        type=Path,
        default=None,
        help="Project directory whose .claude/ is searched first (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show discovery diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve a name, path, or URL to one skill or command")
    resolve.add_argument("query", help="name, namespace:name, file path, skill directory, or http(s) URL")
    resolve.add_argument("--json", action="store_true", help="Print the result as JSON")

    listing = subparsers.add_parser("list", help="List every discovered skill and command")
    listing.add_argument(
        "-f",
        "--format",
        choices=sorted(VALID_LIST_FORMATS),
        default=DEFAULT_LIST_FORMAT,
        help="Output format (default: text)",
    )
    listing.add_argument("--no-color", action="store_true", help="Disable colored output")

    which = subparsers.add_parser("which", help="Show every version of a name across sources")
    which.add_argument("name", help="Bare skill or command name")
    which.add_argument("--json", action="store_true", help="Print matches as JSON")

    complete = subparsers.add_parser("complete", help="Print qualified names starting with a prefix, one per line")
    complete.add_argument("prefix", nargs="?", default="", help="Name prefix such as frontend: (default: all names)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.work_dir)
        resolver = Resolver.from_config(config)
        if args.command == "resolve":
            return _handle_resolve(resolver, args)
        if args.command == "list":
            return _handle_list(resolver, config, args)
        if args.command == "which":
            return _handle_which(resolver, config, args)
        if args.command == "complete":
            return _handle_complete(resolver, args)
    except (ConfigError, PluginManifestError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkilletError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")


def _handle_resolve(resolver: Resolver, args: argparse.Namespace) -> int:
    result = resolver.resolve(args.query)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0
    print(f"{result.kind}\t{result.path}")
    if result.base_url:
        print(f"base_url\t{result.base_url}")
    return 0


def _handle_list(resolver: Resolver, config: SkilletConfig, args: argparse.Namespace) -> int:
    listing = build_listing(resolver)
    if args.format == "text":
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = ListingReporter(listing, color=use_color, work_dir=config.work_dir, home_dir=config.home_dir)
        print(reporter.render())
    else:
        print(render_payload(listing_payload(listing), args.format))
    return 0


def _handle_which(resolver: Resolver, config: SkilletConfig, args: argparse.Namespace) -> int:
    matches = [*resolver.skills.discover_by_name(args.name), *resolver.commands.discover_by_name(args.name)]
    if args.json:
        print(render_payload(resources_payload(matches), "json"))
    else:
        print(render_which(args.name, matches, work_dir=config.work_dir, home_dir=config.home_dir))
    return 0 if matches else 1


def _handle_complete(resolver: Resolver, args: argparse.Namespace) -> int:
    for name in complete_names(resolver, args.prefix):
        print(name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
