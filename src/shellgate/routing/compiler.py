"""Page path to route compilation.

Turns a file path relative to the pages directory into everything the
routers need::

    "users/[id].page"       -> route "/users/:id"
                               pattern ^/users/([^/]+)$
                               shell   "/users/__ACPS_id__/index"
    "docs/[...slug].page"   -> route "/docs/:slug*"
                               pattern ^/docs/(.+)$

Bracket tokens are the single source of parameter names. Route tokens,
pattern groups and placeholder tokens are all derived from them in the
same left-to-right order, so a capture group's position always names the
same parameter.
"""

import re

from shellgate.config import BuildConfig
from shellgate.routing.placeholders import create_placeholder
from shellgate.routing.route import DynamicRoute

# [id] or [...slug]; names are restricted to \w so the route form can
# always be parsed back into the same names
BRACKET_PARAM_RE = re.compile(r"\[(\.\.\.)?(\w+)\]")

# :id or :slug*, or a backslash-escaped literal character
ROUTE_TOKEN_RE = re.compile(r"\\(.)|:(\w+)(\*)?", re.DOTALL)

# Characters with meaning in the route form
_ROUTE_SPECIAL_RE = re.compile(r"([\\:*])")
_WORD_START_RE = re.compile(r"\w")

INDEX_SUFFIX = "/index"

SINGLE_SEGMENT = r"([^/]+)"
REST_SEGMENTS = r"(.+)"


def has_params(file: str) -> bool:
    """True if *file* contains at least one bracket token."""
    return BRACKET_PARAM_RE.search(file) is not None


class RouteCompiler:
    """Pure path derivations for one build configuration.

    Usage::

        compiler = RouteCompiler(BuildConfig(base="/app"))
        route = compiler.compile("users/[id].page")
        route.pattern.match("/app/users/42")
    """

    __slots__ = ("_base", "_build_format", "_page_suffixes", "_render_suffixes")

    def __init__(self, config: BuildConfig) -> None:
        base = config.base.rstrip("/")
        self._base = base
        self._build_format = config.build_format
        # Longest suffix first so ".json.py"-style names strip only ".py"
        self._page_suffixes = tuple(sorted(config.page_suffixes, key=len, reverse=True))
        self._render_suffixes = config.render_suffixes

    # -- Derivations --

    def file_to_route(self, file: str) -> str:
        r"""``"users/[id].page"`` -> ``"/users/:id"``.

        Literal ``\``, ``:`` and ``*`` are backslash-escaped, as is a word
        character directly after a parameter, so ``"time:zone/[id]"``
        becomes ``"/time\:zone/:id"`` and parses back to ``("id",)``.
        """
        route = "/" + self._strip_suffix(file)
        route = _strip_index(route)
        route = self._prepend_base(route)

        parts: list[str] = []
        position = 0
        for match in BRACKET_PARAM_RE.finditer(route):
            parts.append(_escape_literal(route[position : match.start()], after_param=position > 0))
            rest, name = match.groups()
            parts.append(f":{name}*" if rest else f":{name}")
            position = match.end()
        parts.append(_escape_literal(route[position:], after_param=position > 0))
        return "".join(parts)

    def create_route_pattern(self, route: str) -> re.Pattern[str]:
        """``"/users/:id"`` -> ``^/users/([^/]+)$``.

        Rest tokens (``:name*``) are recognised together with their ``*``,
        so the star is never left behind as a quantifier. Literal text
        between tokens is escaped.
        """
        parts: list[str] = []
        literal: list[str] = []
        position = 0
        for match in ROUTE_TOKEN_RE.finditer(route):
            literal.append(route[position : match.start()])
            position = match.end()
            escaped, name, rest = match.groups()
            if name is None:
                literal.append(escaped)
                continue
            parts.append(re.escape("".join(literal)))
            literal.clear()
            parts.append(REST_SEGMENTS if rest else SINGLE_SEGMENT)
        literal.append(route[position:])
        parts.append(re.escape("".join(literal)))
        return re.compile("^" + "".join(parts) + "$")

    def file_to_shell_path(self, file: str) -> str:
        """``"users/[id].page"`` -> ``"/users/__ACPS_id__/index"``.

        The ``/index`` suffix is omitted for ``build_format="file"`` and
        for endpoint files, which render to a single file of their own.
        """
        shell_path = "/" + self._strip_suffix(file)
        shell_path = BRACKET_PARAM_RE.sub(
            lambda m: create_placeholder(m.group(2)),
            shell_path,
        )
        shell_path = _strip_index(shell_path)
        shell_path = self._prepend_base(shell_path)

        if self._build_format == "file" or not self.is_renderable(file):
            return shell_path
        return shell_path + INDEX_SUFFIX

    def extract_params_from_route(self, route: str) -> tuple[str, ...]:
        """``"/users/:id/:rest*"`` -> ``("id", "rest")``."""
        return tuple(m.group(2) for m in ROUTE_TOKEN_RE.finditer(route) if m.group(2) is not None)

    def extract_params_from_file(self, file: str) -> tuple[str, ...]:
        """``"users/[id]/[...rest].page"`` -> ``("id", "rest")``."""
        return tuple(m.group(2) for m in BRACKET_PARAM_RE.finditer(file))

    def compile(self, file: str) -> DynamicRoute:
        """Run every derivation for *file* and bundle the results."""
        route = self.file_to_route(file)
        return DynamicRoute(
            file=file,
            route=route,
            pattern=self.create_route_pattern(route),
            shell_path=self.file_to_shell_path(file),
            params=self.extract_params_from_route(route),
        )

    # -- Helpers --

    def is_page(self, file: str) -> bool:
        return file.endswith(self._page_suffixes)

    def is_renderable(self, file: str) -> bool:
        """Pages render to HTML; other page files (endpoints) do not."""
        return file.endswith(tuple(self._render_suffixes))

    def _strip_suffix(self, file: str) -> str:
        for suffix in self._page_suffixes:
            if file.endswith(suffix):
                return file[: -len(suffix)]
        return file

    def _prepend_base(self, path: str) -> str:
        if self._base:
            return self._base + path
        return path


def _escape_literal(text: str, *, after_param: bool) -> str:
    escaped = _ROUTE_SPECIAL_RE.sub(r"\\\1", text)
    # A word character here would extend the preceding parameter name
    if after_param and _WORD_START_RE.match(escaped):
        return "\\" + escaped
    return escaped


def _strip_index(path: str) -> str:
    """Drop a trailing ``/index`` segment; ``"/index"`` becomes ``"/"``."""
    if path.endswith(INDEX_SUFFIX):
        return path[: -len(INDEX_SUFFIX)] or "/"
    return path
