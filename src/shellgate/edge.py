"""Edge router: request-time shell substitution for deployed builds.

The router owns its compiled route table and its shell cache. For each
request it finds the first matching dynamic route, loads that route's
shell from the static asset store (once per shell per instance), swaps
placeholders for escaped parameter values and returns the page. Anything
it cannot serve goes to the fallback, which is the static asset store or
a chained upstream worker.

Usage::

    router = EdgeRouter(ROUTES)
    response = await router.fetch(request, Env(assets=DirectoryAssets("dist")))

    # or as an ASGI application
    app = router.asgi(Env(assets=DirectoryAssets("dist")))
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, TypeAlias

from shellgate._internal.asgi import Receive, Scope, Send, run_lifespan
from shellgate.assets import Env
from shellgate.errors import URITooLong
from shellgate.escape import escape_html
from shellgate.http.request import Request
from shellgate.http.response import Response, plain_text
from shellgate.routing.placeholders import substitute
from shellgate.routing.route import RouteRecord
from shellgate.routing.table import RouteTable
from shellgate.server.sender import send_response

logger = logging.getLogger("shellgate.edge")

# Longest path the router will run patterns against
MAX_PATH_LENGTH = 1024

SHELL_CACHE_CONTROL = "public, max-age=0, must-revalidate"

Fallback: TypeAlias = Callable[[Request, Env, Any], Awaitable[Response]]


async def serve_asset(request: Request, env: Env, ctx: Any = None) -> Response:
    """Default fallback: hand the request to the static asset store."""
    return await env.assets.fetch(request.path)


class ShellCache:
    """Shell HTML by shell path, for the lifetime of one router instance.

    Unbounded and never invalidated: shells are immutable build output.
    Two requests racing on a cold entry may both fetch; both store the
    same text.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def get(self, shell_path: str) -> str | None:
        return self._entries.get(shell_path)

    def set(self, shell_path: str, html: str) -> None:
        self._entries[shell_path] = html

    def __contains__(self, shell_path: object) -> bool:
        return shell_path in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class EdgeRouter:
    """Match, fetch and substitute, or fall back.

    Args:
        routes: A ``RouteTable`` or the serialized route table
            (``[{"pattern", "shellPath", "params"}, ...]``) in priority order.
        fallback: Called with ``(request, env, ctx)`` when no route matches
            or the matched shell is unavailable.
        escape: Escapes each parameter value before substitution.
    """

    __slots__ = ("_cache", "_escape", "_fallback", "_table")

    def __init__(
        self,
        routes: RouteTable | Iterable[Mapping[str, Any] | RouteRecord],
        *,
        fallback: Fallback = serve_asset,
        escape: Callable[[str], str] = escape_html,
    ) -> None:
        self._table = routes if isinstance(routes, RouteTable) else _to_table(routes)
        self._fallback = fallback
        self._escape = escape
        self._cache = ShellCache()

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def cache(self) -> ShellCache:
        return self._cache

    async def fetch(self, request: Request, env: Env, ctx: Any = None) -> Response:
        """Serve one request."""
        if len(request.path) > MAX_PATH_LENGTH:
            error = URITooLong()
            return plain_text(error.detail, error.status)

        try:
            return await self._serve(request, env, ctx)
        except Exception:
            logger.exception("500 %s %s", request.method, request.path)
            return plain_text("Internal Server Error", 500)

    async def _serve(self, request: Request, env: Env, ctx: Any) -> Response:
        match = self._table.match(request.path)
        if match is None:
            logger.debug("No dynamic route for %s", request.path)
            return await self._fallback(request, env, ctx)

        html = await self._load_shell(match.shell_path, env)
        if html is None:
            logger.debug("Shell %s unavailable, falling back", match.shell_path)
            return await self._fallback(request, env, ctx)

        body = substitute(html, match.params, self._escape)
        return Response(body=body).with_header("Cache-Control", SHELL_CACHE_CONTROL)

    async def _load_shell(self, shell_path: str, env: Env) -> str | None:
        cached = self._cache.get(shell_path)
        if cached is not None:
            return cached

        response = await env.assets.fetch(shell_path + ".html")
        if not response.ok:
            return None

        html = response.text
        self._cache.set(shell_path, html)
        return html

    def asgi(self, env: Env) -> EdgeApp:
        """Bind *env* and expose the router as an ASGI application."""
        return EdgeApp(self, env)


class EdgeApp:
    """ASGI 3.0 adapter around an ``EdgeRouter`` with fixed bindings."""

    __slots__ = ("env", "router")

    def __init__(self, router: EdgeRouter, env: Env) -> None:
        self.router = router
        self.env = env

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await run_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope)
        response = await self.router.fetch(request, self.env)
        await send_response(response, send, head=request.method == "HEAD")


def _to_table(routes: Iterable[Mapping[str, Any] | RouteRecord]) -> RouteTable:
    records = [
        item if isinstance(item, RouteRecord) else RouteRecord.from_dict(dict(item))
        for item in routes
    ]
    return RouteTable(records)
