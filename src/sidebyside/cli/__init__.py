"""Sidebyside CLI — route listing, validation and static export.

Entry point registered as ``sidebyside`` in ``pyproject.toml``::

    [project.scripts]
    sidebyside = "sidebyside.cli:main"
"""

import argparse
import sys

from sidebyside.cli._resolve import DEFAULT_SITE


def _add_site_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "site",
        nargs="?",
        default=DEFAULT_SITE,
        help=f"Import string (e.g. mysite:site, default {DEFAULT_SITE})",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``sidebyside`` command."""
    parser = argparse.ArgumentParser(
        prog="sidebyside",
        description="Sidebyside — one concept, five languages, side by side.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: the site's log_level)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- sidebyside routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the route table")
    _add_site_argument(routes_parser)

    # -- sidebyside check -------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Render every route and report problems")
    _add_site_argument(check_parser)

    # -- sidebyside build -------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Freeze the site to static HTML")
    _add_site_argument(build_parser)
    build_parser.add_argument("--out", default=None, help="Output directory")
    build_parser.add_argument(
        "--clean",
        action="store_true",
        help="Remove the output directory first",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from sidebyside.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from sidebyside.cli._check import run_check

        run_check(args)
    elif args.command == "build":
        from sidebyside.cli._build import run_build

        run_build(args)
