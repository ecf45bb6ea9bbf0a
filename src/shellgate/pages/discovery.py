"""Filesystem page discovery and the route scan pass.

Walks the pages directory tree and collects page files. Files whose
path contains a bracket token (``[id]``, ``[...slug]``) are candidates
for dynamic routing; each is compiled into a ``DynamicRoute`` unless the
page already declares its own static paths.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from shellgate.config import BuildConfig
from shellgate.pages.inject import declares_static_paths
from shellgate.routing.compiler import RouteCompiler, has_params
from shellgate.routing.route import DynamicRoute

logger = logging.getLogger("shellgate.build")


def discover_page_files(pages_dir: str | Path, suffixes: Sequence[str]) -> list[str]:
    """Return page files under *pages_dir* as relative POSIX paths.

    Files come before subdirectories at each level, both sorted by name.
    Names starting with ``_`` or ``.`` are private and skipped.

    Raises:
        FileNotFoundError: If *pages_dir* is not a directory.
    """
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Pages directory not found: {root}")

    files: list[str] = []
    _walk_directory(root, root, tuple(suffixes), files)
    return files


def _walk_directory(directory: Path, root: Path, suffixes: tuple[str, ...], files: list[str]) -> None:
    entries = sorted(directory.iterdir())

    for item in entries:
        if not item.is_file() or item.name.startswith(("_", ".")):
            continue
        if item.name.endswith(suffixes):
            files.append(item.relative_to(root).as_posix())

    for item in entries:
        if not item.is_dir() or item.name.startswith(("_", ".")):
            continue
        _walk_directory(item, root, suffixes, files)


def scan_routes(config: BuildConfig, compiler: RouteCompiler | None = None) -> list[DynamicRoute]:
    """Discover and compile every dynamic page, in discovery order.

    Discovery order is match priority: both routers take the first
    matching route.
    """
    compiler = compiler or RouteCompiler(config)
    pages_dir = config.pages_path
    logger.debug("Scanning pages in: %s", pages_dir)

    files = discover_page_files(pages_dir, config.page_suffixes)
    routes: list[DynamicRoute] = []
    for file in files:
        if not has_params(file):
            continue
        source = (pages_dir / file).read_text(encoding="utf-8", errors="replace")
        if declares_static_paths(source):
            logger.debug("%s declares its own static paths; not dynamic", file)
            continue
        routes.append(compiler.compile(file))
    return routes
