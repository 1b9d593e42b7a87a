"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import sys
from pathlib import Path

from sighting_map import __version__
from sighting_map.config import get_settings
from sighting_map.datasources.sightings import load_sightings
from sighting_map.filtering import distinct_species, filter_sightings
from sighting_map.flows.build import build_all
from sighting_map.projection import project_sightings
from sighting_map.renderers.formatting import format_coordinate
from sighting_map.schemas import ALL_SPECIES, FilterCriteria, Sighting, TimeWindow


def _add_filter_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--search", type=str, default="", help="Search species, description, reporter")
    parser.add_argument(
        "--species",
        type=str,
        default=ALL_SPECIES,
        help=f"Exact species name (default: {ALL_SPECIES})",
    )
    parser.add_argument(
        "--time",
        type=TimeWindow,
        choices=list(TimeWindow),
        default=TimeWindow.ALL,
        help="Time period (default: all)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="sighting-map",
        description="Filter and map geotagged wildlife sightings",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    filter_parser = subparsers.add_parser("filter", help="List sightings matching filters")
    filter_parser.add_argument("path", type=Path, help="Sightings JSON file")
    _add_filter_options(filter_parser)

    species_parser = subparsers.add_parser("species", help="List distinct species")
    species_parser.add_argument("path", type=Path, help="Sightings JSON file")

    project_parser = subparsers.add_parser("project", help="Print map positions")
    project_parser.add_argument("path", type=Path, help="Sightings JSON file")
    _add_filter_options(project_parser)

    build_parser = subparsers.add_parser("build", help="Build the static sightings page")
    _add_filter_options(build_parser)

    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(search_term=args.search, species=args.species, time_window=args.time)


def _load(path: Path) -> list[Sighting] | None:
    """Load sightings, reporting unreadable files on stderr."""
    try:
        return load_sightings(path)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Timezone: {settings.timezone}")
    return 0


def cmd_filter(args: argparse.Namespace) -> int:
    """Handle the 'filter' command: print matching sightings."""
    sightings = _load(args.path)
    if sightings is None:
        return 1

    settings = get_settings()
    criteria = _criteria_from_args(args)
    if args.debug:
        print(f"Debug mode enabled. Criteria: {criteria}")

    shown = filter_sightings(sightings, criteria, settings.now())
    for s in shown:
        reporter = f" ({s.reported_by})" if s.reported_by else ""
        coords = format_coordinate(s.latitude, s.longitude)
        print(f"{s.timestamp.isoformat()}  {s.species}{reporter}  [{coords}]  {s.description}")
    print(f"{len(shown)} of {len(sightings)} sightings")
    return 0


def cmd_species(args: argparse.Namespace) -> int:
    """Handle the 'species' command: print the species selector options."""
    sightings = _load(args.path)
    if sightings is None:
        return 1

    for name in distinct_species(sightings):
        print(name)
    return 0


def cmd_project(args: argparse.Namespace) -> int:
    """Handle the 'project' command: print bounds and marker positions."""
    sightings = _load(args.path)
    if sightings is None:
        return 1

    settings = get_settings()
    shown = filter_sightings(sightings, _criteria_from_args(args), settings.now())
    projection = project_sightings(shown)

    b = projection.bounds
    print(f"Bounds: lat {b.min_lat:.4f}..{b.max_lat:.4f}, lng {b.min_lng:.4f}..{b.max_lng:.4f}")
    for pos in projection.positions:
        print(f"{pos.id}\t{pos.x:.2f}\t{pos.y:.2f}")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: render the static page."""
    result = build_all(criteria=_criteria_from_args(args))
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Built {result['output']} ({result['shown']} of {result['sightings']} sightings)")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'sighting-map build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "filter": cmd_filter,
        "species": cmd_species,
        "project": cmd_project,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
