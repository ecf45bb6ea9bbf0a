"""Build a ``BuildConfig`` from parsed CLI arguments."""

import argparse
import sys

from shellgate.config import BuildConfig
from shellgate.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> BuildConfig:
    """Translate CLI flags into a validated config; exit 1 if invalid."""
    kwargs: dict[str, object] = {
        "root": args.root,
        "pages_dir": args.pages,
        "base": args.base,
        "build_format": args.build_format,
    }
    if getattr(args, "out", None) is not None:
        kwargs["out_dir"] = args.out
    if getattr(args, "exclude", None):
        kwargs["exclude_paths"] = tuple(args.exclude)
    if getattr(args, "public", None) is not None:
        kwargs["public_dir"] = args.public
    if getattr(args, "host", None) is not None:
        kwargs["host"] = args.host
    if getattr(args, "port", None) is not None:
        kwargs["port"] = args.port

    try:
        return BuildConfig(**kwargs)  # type: ignore[arg-type]
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
