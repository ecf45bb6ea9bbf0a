"""Generated edge worker: chaining, code generation and loading."""

from shellgate.worker.builder import build_worker_code
from shellgate.worker.chain import (
    GENERATED_FILE_MARKER,
    UPSTREAM_WORKER_FILENAME,
    WORKER_NAME,
    WorkerChainConfig,
    setup_worker_chain,
)
from shellgate.worker.loader import load_worker

__all__ = [
    "GENERATED_FILE_MARKER",
    "UPSTREAM_WORKER_FILENAME",
    "WORKER_NAME",
    "WorkerChainConfig",
    "build_worker_code",
    "load_worker",
    "setup_worker_chain",
]
