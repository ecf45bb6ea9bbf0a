"""Static file serving middleware for the dev server.

Serves the public build directory at the site root. Resolves directory
indexes and extensionless ``.html`` files, so shell URLs such as
``/users/__ACPS_id__`` resolve in both build formats.

Falls through to the next handler for anything it cannot serve.
"""

from pathlib import Path

from shellgate.assets import DirectoryAssets
from shellgate.http.request import Request
from shellgate.http.response import Response
from shellgate.middleware.protocol import Next


class StaticFiles:
    """Middleware that serves static files from a directory.

    Usage::

        app = ShellApp(middleware=[StaticFiles("./dist", cache_control="no-cache")])
    """

    __slots__ = ("_assets",)

    def __init__(self, directory: str | Path, *, cache_control: str = "no-cache") -> None:
        self._assets = DirectoryAssets(directory, cache_control=cache_control)

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a static file or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        path = request.path
        candidates = [path]
        if not path.endswith("/") and "." not in path.rsplit("/", 1)[-1]:
            candidates.append(path + ".html")

        for candidate in candidates:
            response = await self._assets.fetch(candidate)
            if response.ok:
                return response
            if response.status == 403:
                return response

        return await next(request)
