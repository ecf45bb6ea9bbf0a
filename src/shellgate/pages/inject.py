"""Static-path declaration stubs for dynamic pages.

A dynamic page is rendered exactly once, with every parameter set to its
placeholder token. Pages that do not say which paths to render get a
``get_static_paths()`` stub appended that asks for that single render.
Pages that already declare one are left to enumerate their own paths.
"""

import json
import re
from collections.abc import Sequence

from shellgate.routing.placeholders import create_placeholder

STATIC_PATHS_FUNCTION = "get_static_paths"

_DECLARATION_RE = re.compile(
    rf"^[ \t]*(?:async[ \t]+)?def[ \t]+{STATIC_PATHS_FUNCTION}[ \t]*\(",
    re.MULTILINE,
)


def declares_static_paths(source: str) -> bool:
    """True if *source* defines ``get_static_paths`` at any indentation."""
    return _DECLARATION_RE.search(source) is not None


def render_static_paths_stub(params: Sequence[str]) -> str:
    """The appended declaration: one render with placeholder params."""
    values = {name: create_placeholder(name) for name in params}
    return (
        "\n"
        f"def {STATIC_PATHS_FUNCTION}():\n"
        f'    return [{{"params": {json.dumps(values)}}}]\n'
    )


def inject_static_paths(source: str, params: Sequence[str]) -> str | None:
    """Return *source* with the stub appended, or None if nothing to inject."""
    if not params or declares_static_paths(source):
        return None
    return source + "\n" + render_static_paths_stub(params)
