"""Placeholder tokens baked into pre-rendered shells.

A shell for ``/users/:id`` is rendered once with the literal token
``__ACPS_id__`` wherever the page prints ``id``. Routers swap each token
for the escaped request value.

Parameter names may themselves contain underscores (``id_``, ``a__b``),
so a generic token regex cannot tell where a name ends. Substitution
matches only the names of the route being served.
"""

import functools
import re
from collections.abc import Callable, Iterable, Mapping

PLACEHOLDER_PREFIX = "__ACPS_"
PLACEHOLDER_SUFFIX = "__"

# Display only; ambiguous for names with trailing or doubled underscores
PLACEHOLDER_RE = re.compile(r"__ACPS_(\w+?)__")


def create_placeholder(name: str) -> str:
    """``"id"`` -> ``"__ACPS_id__"``."""
    return f"{PLACEHOLDER_PREFIX}{name}{PLACEHOLDER_SUFFIX}"


@functools.lru_cache(maxsize=256)
def _token_pattern(names: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first: "id_" must win over "id" on "__ACPS_id___"
    alternation = "|".join(re.escape(name) for name in sorted(names, key=len, reverse=True))
    return re.compile(f"{re.escape(PLACEHOLDER_PREFIX)}({alternation}){re.escape(PLACEHOLDER_SUFFIX)}")


def placeholder_pattern(names: Iterable[str]) -> re.Pattern[str]:
    """Regex matching the tokens of exactly *names*."""
    return _token_pattern(tuple(sorted(set(names))))


def substitute(
    html: str,
    params: Mapping[str, str],
    escape: Callable[[str], str],
) -> str:
    """Replace the placeholder of every parameter in *params* with its escaped value.

    Tokens of other names are left as they are.
    """
    if not params:
        return html

    def _replace(match: re.Match[str]) -> str:
        return escape(params[match.group(1)])

    return placeholder_pattern(params).sub(_replace, html)


def display_placeholders(path: str) -> str:
    """Render placeholders as ``:name`` for log output."""
    return PLACEHOLDER_RE.sub(r":\1", path)
