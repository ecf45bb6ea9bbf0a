"""Shellgate CLI: route listing, build emission, dev and preview servers.

Entry point registered as ``shellgate`` in ``pyproject.toml``::

    [project.scripts]
    shellgate = "shellgate.cli:main"
"""

import argparse
import logging
import sys


def _add_project_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--root", default=".", help="Project root directory")
    parser.add_argument("--pages", default="src/pages", help="Pages directory, relative to root")
    parser.add_argument("--base", default="/", help="Base URL path the site is served under")
    parser.add_argument(
        "--format",
        dest="build_format",
        choices=("directory", "file"),
        default="directory",
        help="Output format of rendered pages",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``shellgate`` command."""
    parser = argparse.ArgumentParser(
        prog="shellgate",
        description="Shellgate: dynamic routes for pre-rendered static sites.",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error"),
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- shellgate routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List detected dynamic routes")
    _add_project_args(routes_parser)

    # -- shellgate build --------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Emit the edge worker and routes manifest")
    _add_project_args(build_parser)
    build_parser.add_argument("--out", default="dist", help="Build output directory, relative to root")
    build_parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATH",
        help="Extra path to keep out of the worker (repeatable)",
    )

    # -- shellgate dev ----------------------------------------------------
    dev_parser = subparsers.add_parser("dev", help="Serve pages with live dynamic routes")
    _add_project_args(dev_parser)
    dev_parser.add_argument("--public", default="dist", help="Directory with rendered pages and assets")
    dev_parser.add_argument("--host", default=None, help="Bind host address")
    dev_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- shellgate preview ------------------------------------------------
    preview_parser = subparsers.add_parser("preview", help="Serve a built site through its worker")
    preview_parser.add_argument("out", help="Build output directory containing _worker.py")
    preview_parser.add_argument("--host", default="127.0.0.1", help="Bind host address")
    preview_parser.add_argument("--port", type=int, default=8788, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from shellgate.cli._routes import run_routes

        run_routes(args)
    elif args.command == "build":
        from shellgate.cli._build import run_build

        run_build(args)
    elif args.command == "dev":
        from shellgate.cli._dev import run_dev

        run_dev(args)
    elif args.command == "preview":
        from shellgate.cli._preview import run_preview

        run_preview(args)
