"""Dev router: dynamic routes during development.

Matches requests the same way the edge router does, but there is no
build output yet: the shell is requested over HTTP from the dev server
itself (a loopback request for the shell URL), on every request, so page
edits show up immediately.

Anything that goes wrong here degrades to normal serving. A failed or
non-2xx shell fetch, or an unexpected error, passes the request on to
the next handler.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from shellgate.escape import escape_html
from shellgate.http.request import Request
from shellgate.http.response import Response
from shellgate.middleware.protocol import Next
from shellgate.pages.registry import RouteRegistry
from shellgate.routing.compiler import INDEX_SUFFIX
from shellgate.routing.placeholders import substitute

logger = logging.getLogger("shellgate.dev")


def shell_url_path(shell_path: str) -> str:
    """The URL the dev server serves a shell at (``/index`` dropped)."""
    if shell_path.endswith(INDEX_SUFFIX):
        return shell_path[: -len(INDEX_SUFFIX)]
    return shell_path


@dataclass(frozen=True, slots=True)
class DevMatch:
    """A resolved dev request: raw shell HTML and decoded params."""

    html: str
    params: dict[str, str]


class DevRouter:
    """Middleware that serves dynamic routes from live shells.

    Reads the registry's current table on every request, so a rescan is
    picked up without restarting.

    Usage::

        registry = RouteRegistry(config)
        registry.scan()
        app = ShellApp(middleware=[DevRouter(registry), StaticFiles(config.public_path)])
    """

    __slots__ = ("_escape", "_registry", "_timeout", "_transport")

    def __init__(
        self,
        registry: RouteRegistry,
        *,
        escape: Callable[[str], str] = escape_html,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._registry = registry
        self._escape = escape
        self._timeout = timeout
        self._transport = transport

    async def __call__(self, request: Request, next: Next) -> Response:
        host = request.host
        if not host or request.method not in ("GET", "HEAD"):
            return await next(request)

        scheme = request.headers.get("x-forwarded-proto") or request.scheme

        try:
            result = await self.resolve(request.path, host=host, scheme=scheme)
        except Exception:
            logger.exception("Error handling dynamic route %s", request.path)
            return await next(request)

        if result is None:
            return await next(request)

        return Response(body=substitute(result.html, result.params, self._escape))

    async def resolve(self, path: str, *, host: str, scheme: str = "http") -> DevMatch | None:
        """Match *path* and fetch its shell. None means "not mine"."""
        logger.debug("Checking request: %s", path)

        match = self._registry.table.match(path)
        if match is None:
            logger.debug("No matching dynamic route found")
            return None

        shell_url = shell_url_path(match.shell_path)
        if path == shell_url:
            logger.debug("Request is for shell itself, skipping middleware")
            return None

        html = await self._fetch_shell(f"{scheme}://{host}{shell_url}")
        if html is None:
            return None
        return DevMatch(html=html, params=match.params)

    async def _fetch_shell(self, url: str) -> str | None:
        logger.debug("Fetching shell from %s", url)
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.error("Error fetching shell from %s: %s", url, exc)
            return None

        if not response.is_success:
            logger.error("Failed to fetch shell from %s: %d", url, response.status_code)
            return None
        return response.text
