"""Worker chaining: keep a user-authored worker running behind the router.

The build output may already hold a worker at ``_worker.py``: a single
file, or a directory bundle whose entry point is ``index.py``. Three
cases:

- nothing there: the router falls back to the static asset store.
- a worker this package generated on an earlier build (it carries
  ``GENERATED_FILE_MARKER``): treated as absent and overwritten. A
  generated worker is never chained to itself.
- anything else: the user's worker is moved to ``_static_upstream.py``
  inside the bundle and the router delegates unmatched requests to it.

Filesystem errors while moving things are not caught here. A half-moved
worker directory is not something a build may continue from.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("shellgate.build")

GENERATED_FILE_MARKER = "# shellgate: generated worker - do not edit"

WORKER_NAME = "_worker.py"
ROUTES_MANIFEST = "_routes.json"
WORKER_ENTRY = "index.py"
UPSTREAM_WORKER_FILENAME = "_static_upstream.py"

DEFAULT_FALLBACK_CODE = "return await env.assets.fetch(request.path)"

UPSTREAM_IMPORT = f'_upstream = _load_sibling("{UPSTREAM_WORKER_FILENAME}")'

UPSTREAM_FALLBACK_CODE = """\
handler = getattr(_upstream, "fetch", None)
if callable(handler):
    result = handler(request, env, ctx)
    if inspect.isawaitable(result):
        result = await result
    return result
return await env.assets.fetch(request.path)"""


@dataclass(frozen=True, slots=True)
class WorkerChainConfig:
    """How the generated router reaches a pre-existing worker.

    ``upstream_import`` is empty when there is nothing to chain.
    ``fallback_code`` is the body of the generated ``fallback`` coroutine.
    """

    upstream_import: str = ""
    fallback_code: str = DEFAULT_FALLBACK_CODE

    @property
    def chained(self) -> bool:
        return bool(self.upstream_import)


def setup_worker_chain(out_dir: str | Path, worker_path: str | Path) -> WorkerChainConfig:
    """Inspect *worker_path* and relocate a user-authored worker if there is one."""
    out_dir = Path(out_dir)
    worker_path = Path(worker_path)

    if not worker_path.exists():
        return WorkerChainConfig()

    if not is_user_defined_worker(worker_path):
        return WorkerChainConfig()

    if worker_path.is_dir():
        upstream = worker_path / UPSTREAM_WORKER_FILENAME
        shutil.copyfile(worker_path / WORKER_ENTRY, upstream)
        logger.info("Chaining existing worker as %s", UPSTREAM_WORKER_FILENAME)
    else:
        logger.info("Converting %s file to directory structure", worker_path.name)
        backup = out_dir / f"{worker_path.name}.backup"
        shutil.copyfile(worker_path, backup)
        worker_path.unlink()
        worker_path.mkdir(parents=True)
        shutil.move(backup, worker_path / UPSTREAM_WORKER_FILENAME)

    return WorkerChainConfig(
        upstream_import=UPSTREAM_IMPORT,
        fallback_code=UPSTREAM_FALLBACK_CODE,
    )


def is_user_defined_worker(worker_path: Path) -> bool:
    """True if *worker_path* holds a worker without the generated marker.

    A directory without an entry point has nothing to chain.
    """
    entry = worker_path / WORKER_ENTRY if worker_path.is_dir() else worker_path
    if not entry.is_file():
        return False
    content = entry.read_text(encoding="utf-8", errors="replace")
    return GENERATED_FILE_MARKER not in content
