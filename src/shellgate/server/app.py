"""ASGI application running a middleware pipeline.

The dev server's application: middleware such as ``DevRouter`` and
``StaticFiles`` wrapped around a terminal handler that answers 404.
"""

from collections.abc import Sequence
from typing import Any

from shellgate._internal.asgi import Hook, Receive, Scope, Send, run_lifespan
from shellgate.errors import HTTPError, NotFound
from shellgate.http.request import Request
from shellgate.http.response import Response
from shellgate.middleware.protocol import Middleware, Next
from shellgate.server.errors import handle_http_error, handle_internal_error
from shellgate.server.sender import send_response


async def not_found(request: Request) -> Response:
    """Innermost handler: nothing upstream claimed the request."""
    raise NotFound(f"No page at {request.path!r}")


class ShellApp:
    """ASGI 3.0 application: middleware around a terminal handler.

    Usage::

        app = ShellApp(middleware=[DevRouter(registry), StaticFiles("dist")])
    """

    __slots__ = ("_handler", "_middleware", "_shutdown_hooks", "_startup_hooks")

    def __init__(
        self,
        middleware: Sequence[Middleware] = (),
        *,
        handler: Next = not_found,
    ) -> None:
        self._middleware = tuple(middleware)
        self._handler = handler
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []

    def on_startup(self, func: Hook) -> Hook:
        """Register a sync or async hook run at ASGI lifespan startup."""
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register a sync or async hook run at ASGI lifespan shutdown."""
        self._shutdown_hooks.append(func)
        return func

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await run_lifespan(
                receive,
                send,
                startup=self._startup_hooks,
                shutdown=self._shutdown_hooks,
            )
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope)
        try:
            response = await self.handle(request)
        except HTTPError as exc:
            response = handle_http_error(exc, request)
        except Exception:
            response = handle_internal_error(request)

        await send_response(response, send, head=request.method == "HEAD")

    async def handle(self, request: Request) -> Response:
        """Run *request* through the middleware pipeline."""
        handler = self._handler
        for mw in reversed(self._middleware):
            outer = handler

            async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
                return await _mw(req, _next)

            handler = make_next

        return await handler(request)
