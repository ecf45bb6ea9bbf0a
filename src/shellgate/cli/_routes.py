"""``shellgate routes``: list detected dynamic routes.

Scans the pages directory and prints ROUTE, SHELL and FILE for every
page that will be served from a shell.
"""

import argparse
import sys

from shellgate.cli._config import config_from_args
from shellgate.pages.discovery import scan_routes
from shellgate.routing.placeholders import display_placeholders


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of dynamic routes in match-priority order."""
    config = config_from_args(args)
    try:
        routes = scan_routes(config)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No dynamic routes detected.")
        return

    rows = [(r.route, display_placeholders(r.shell_path), r.file) for r in routes]

    max_route = max(max(len(r[0]) for r in rows), 5)  # "ROUTE" header
    max_shell = max(max(len(r[1]) for r in rows), 5)  # "SHELL" header

    fmt = f"{{:<{max_route}}}  {{:<{max_shell}}}  {{}}"
    print(fmt.format("ROUTE", "SHELL", "FILE"))
    sep_len = max_route + max_shell + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
