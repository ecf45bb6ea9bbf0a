"""HTML escaping for substituted route parameters.

Shared by the edge router and the dev router. This module is copied
verbatim next to every generated worker, so it must not import anything
from shellgate.
"""

import re

HTML_ESCAPE_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
    "/": "&#x2F;",
    "\\": "&#x5C;",
}

_ESCAPE_RE = re.compile(r"[&<>\"'/\\]")


def escape_html(unsafe: str) -> str:
    """Replace each of ``& < > " ' / \\`` with its character reference."""
    return _ESCAPE_RE.sub(lambda m: HTML_ESCAPE_MAP[m.group(0)], unsafe)
