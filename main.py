"""CLI entry point for the student roster query tool."""

import argparse
import locale
import logging
import sys
from pathlib import Path

import yaml

from roster.core.config import Settings
from roster.core.dataset import load_records
from roster.core.schemas import ALL, DEPARTMENTS, YEARS, PageResult, QueryRequest
from roster.pipeline.orchestrator import export_page_json, run_query
from roster.pipeline.paginator import page_markers
from roster.pipeline.stats import summarize

DEFAULT_CONFIG = "config/settings.yaml"

logger = logging.getLogger(__name__)


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--data",
        help="Path to roster YAML/JSON file (default: data_path from settings)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Student roster query tool - search, filter, sort and page student records",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- query subcommand (default) ---
    query_parser = subparsers.add_parser("query", help="Search and list students")
    _add_common_args(query_parser)
    query_parser.add_argument(
        "--search", "-s",
        default="",
        help="Fuzzy search text matched against roll number or name",
    )
    query_parser.add_argument(
        "--department",
        default=ALL,
        choices=[ALL, *DEPARTMENTS],
        help="Department filter (default: all)",
    )
    query_parser.add_argument(
        "--year",
        default=ALL,
        choices=[ALL, *(str(y) for y in YEARS)],
        help="Year filter (default: all)",
    )
    query_parser.add_argument(
        "--sort",
        choices=["name", "score"],
        help="Sort field (default: from settings)",
    )
    query_parser.add_argument(
        "--direction",
        choices=["asc", "desc"],
        help="Sort direction (default: from settings)",
    )
    query_parser.add_argument(
        "--page", "-p",
        type=int,
        default=1,
        help="Page number; out-of-range values are clamped (default: 1)",
    )
    query_parser.add_argument(
        "--export",
        choices=["json"],
        help="Export the page to format (json)",
    )

    # --- stats subcommand ---
    stats_parser = subparsers.add_parser("stats", help="Show roster summary figures")
    _add_common_args(stats_parser)

    argv = list(sys.argv[1:] if argv is None else argv)

    # Default to query when no subcommand given
    if not argv or argv[0] not in (*subparsers.choices, "-h", "--help"):
        argv = ["query", *argv]

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def setup_collation() -> None:
    """Use the host's collation order for name sorting."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning("Host locale unavailable, using default collation: %s", e)


def load_settings(path: str) -> Settings:
    """Load settings, falling back to defaults when the default file is absent."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        logger.debug("No %s found - using default settings", path)
        return Settings()
    return Settings.from_yaml(path)


def build_request(args: argparse.Namespace, settings: Settings) -> QueryRequest:
    return QueryRequest(
        search_text=args.search,
        department=args.department,
        year=args.year,
        sort_field=args.sort or settings.default_sort_field,
        sort_direction=args.direction or settings.default_sort_direction,
        page=args.page,
        page_size=settings.page_size,
    )


def print_page(result: PageResult, total_records: int, window: int) -> None:
    """Print one page of results as a plain-text table."""
    heading = f"Students ({result.total_matches}"
    if total_records != result.total_matches:
        heading += f" of {total_records}"
    heading += ")"
    if result.total_pages > 1:
        heading += f" - Page {result.current_page} of {result.total_pages}"
    print(heading)

    if not result.items:
        if total_records == 0:
            print("No students added yet.")
        else:
            print("No students match your search criteria.")
        return

    print(f"{'Roll Number':<14} {'Name':<24} {'Dept':<5} {'Year':<5} {'Score':>5}")
    for r in result.items:
        print(f"{r.roll_number:<14} {r.name:<24} {r.department:<5} {r.year:<5} {r.score:>5.2f}")

    if result.total_pages > 1:
        print(
            f"\nShowing {result.first_index} to {result.last_index} "
            f"of {result.total_matches} students"
        )
        markers = page_markers(result.current_page, result.total_pages, window)
        print(" ".join(
            f"[{m}]" if m == result.current_page else str(m) for m in markers
        ))


def cmd_query(args: argparse.Namespace, settings: Settings) -> None:
    """Handle query subcommand."""
    records = load_records(args.data or settings.data_path)
    request = build_request(args, settings)
    result = run_query(records, request, settings.matching)
    logger.info(
        "Query matched %d of %d records", result.total_matches, len(records),
    )

    if args.export == "json":
        print(export_page_json(result))
    else:
        print_page(result, len(records), settings.page_window)


def cmd_stats(args: argparse.Namespace, settings: Settings) -> None:
    """Handle stats subcommand."""
    records = load_records(args.data or settings.data_path)
    stats = summarize(records)
    print(f"Total Students: {stats.total_records}")
    print(f"Departments:    {stats.department_count}")
    print(f"Average Score:  {stats.average_score:.2f}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)
    setup_collation()

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "stats":
            cmd_stats(args, settings)
        else:
            cmd_query(args, settings)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
