"""Render the generated worker entry point."""

import pprint
import textwrap
from collections.abc import Sequence
from typing import Any

from shellgate.worker.chain import (
    GENERATED_FILE_MARKER,
    ROUTES_MANIFEST,
    WORKER_NAME,
    WorkerChainConfig,
)
from shellgate.worker.template import WORKER_INDEX_PY


def build_worker_code(
    routes_data: Sequence[dict[str, Any]],
    chain: WorkerChainConfig,
) -> str:
    """Splice the serialized route table and chain config into the template.

    The route table is written as a Python literal so patterns round-trip
    exactly, backslashes included.
    """
    return WORKER_INDEX_PY.format(
        marker=GENERATED_FILE_MARKER,
        upstream_import=chain.upstream_import,
        routes_data=pprint.pformat(list(routes_data), width=100, sort_dicts=False),
        fallback_code=textwrap.indent(chain.fallback_code, "    "),
        hidden=(WORKER_NAME, ROUTES_MANIFEST),
    )
