"""Load a generated worker bundle from disk.

Used by ``shellgate preview`` and by tests that exercise the emitted
artifact rather than an in-process router.
"""

import importlib.util
from pathlib import Path
from types import ModuleType

from shellgate.worker.chain import WORKER_ENTRY


def load_worker(worker_path: str | Path) -> ModuleType:
    """Execute ``<worker_path>/index.py`` and return the module.

    Each call loads a fresh module, so the returned router starts with
    an empty shell cache.
    """
    entry = Path(worker_path) / WORKER_ENTRY
    if not entry.is_file():
        raise FileNotFoundError(f"Worker entry point not found: {entry}")

    spec = importlib.util.spec_from_file_location(f"_shellgate_worker_{id(entry)}", entry)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load worker from {entry}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
