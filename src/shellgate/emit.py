"""Build artifact emitters.

Writes the two files a deployment needs once a scan has found dynamic
routes:

- ``_worker.py/index.py``: the edge router with the route table baked
  in, plus a copy of ``escape.py`` next to it.
- ``_routes.json``: the access-control manifest. Shell files are
  excluded so the generic static handler never serves a raw shell.
"""

import json
import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from shellgate import escape as escape_module
from shellgate.config import BuildConfig
from shellgate.routing.placeholders import display_placeholders
from shellgate.routing.route import DynamicRoute
from shellgate.worker.builder import build_worker_code
from shellgate.worker.chain import ROUTES_MANIFEST, WORKER_ENTRY, WORKER_NAME, setup_worker_chain

logger = logging.getLogger("shellgate.build")

# Always served straight from static storage
INFRASTRUCTURE_EXCLUDES = ("/favicon.ico", "/static/*", "/assets/*")


def generate_worker(out_dir: str | Path, routes: Sequence[DynamicRoute]) -> Path:
    """Write the worker bundle into *out_dir* and return its entry point."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    routes_data = [route.to_record().to_dict() for route in routes]

    worker_dir = out_dir / WORKER_NAME
    chain = setup_worker_chain(out_dir, worker_dir)

    worker_dir.mkdir(parents=True, exist_ok=True)
    worker_file = worker_dir / WORKER_ENTRY

    logger.info("Writing worker to %s", worker_file)
    worker_file.write_text(build_worker_code(routes_data, chain), encoding="utf-8")

    shutil.copyfile(escape_module.__file__, worker_dir / "escape.py")
    return worker_file


def generate_routes_manifest(
    out_dir: str | Path,
    routes: Sequence[DynamicRoute],
    exclude_paths: Sequence[str] = (),
) -> Path:
    """Write ``_routes.json`` into *out_dir* and return its path."""
    manifest = {
        "version": 1,
        "include": ["/*"],
        "exclude": [
            *INFRASTRUCTURE_EXCLUDES,
            *exclude_paths,
            *(route.shell_path + ".html" for route in routes),
        ],
    }
    path = Path(out_dir) / ROUTES_MANIFEST
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return path


def emit_build(config: BuildConfig, routes: Sequence[DynamicRoute]) -> bool:
    """Emit worker and manifest for *routes*. Returns False if there was nothing to emit."""
    if not routes:
        logger.info("No client-side dynamic routes detected; nothing to emit.")
        return False

    logger.info("Detected %d client-side dynamic routes:", len(routes))
    for route in routes:
        logger.info("  %s -> %s", route.route, display_placeholders(route.shell_path))

    out_dir = config.out_path
    generate_worker(out_dir, routes)
    generate_routes_manifest(out_dir, routes, config.exclude_paths)

    logger.info("Generated edge worker assets in %s", out_dir)
    return True
