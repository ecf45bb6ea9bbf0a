"""``shellgate build``: scan pages and emit deployment artifacts.

Run after the site generator has rendered the shells into the output
directory. Writes ``_worker.py/`` and ``_routes.json`` there.
"""

import argparse
import sys

from shellgate.cli._config import config_from_args
from shellgate.emit import emit_build
from shellgate.pages.discovery import scan_routes


def run_build(args: argparse.Namespace) -> None:
    """Scan, then emit. Filesystem errors abort the build with exit 1."""
    config = config_from_args(args)
    try:
        routes = scan_routes(config)
        emit_build(config, routes)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
