"""Middleware: Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    DevRouter -- Serve dynamic routes from live shells during development
    StaticFiles -- Serve the public build directory
"""

from shellgate.middleware.dev_router import DevRouter
from shellgate.middleware.protocol import Middleware, Next
from shellgate.middleware.static import StaticFiles

__all__ = ["DevRouter", "Middleware", "Next", "StaticFiles"]
