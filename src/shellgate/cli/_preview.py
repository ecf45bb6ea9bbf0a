"""``shellgate preview``: serve a build through its generated worker."""

import argparse
import sys
from pathlib import Path

from shellgate.worker.chain import WORKER_NAME
from shellgate.worker.loader import load_worker


def run_preview(args: argparse.Namespace) -> None:
    """Load ``<out>/_worker.py`` and serve its ASGI ``app``."""
    worker_path = Path(args.out) / WORKER_NAME
    try:
        worker = load_worker(worker_path)
    except (FileNotFoundError, ImportError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from shellgate.server.dev import run_dev_server

    run_dev_server(worker.app, args.host, args.port)
