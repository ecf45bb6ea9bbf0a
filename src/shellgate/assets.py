"""Static asset store: the edge router's view of the build output.

An asset store answers "fetch by path" with a ``Response``; a non-2xx
status means the asset is not available. ``DirectoryAssets`` serves a
build output directory and is what generated workers bind by default.
"""

import mimetypes
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol
from urllib.parse import unquote

from shellgate.http.response import Response, plain_text


class AssetStore(Protocol):
    """Anything that can fetch a built asset by URL path."""

    async def fetch(self, path: str) -> Response: ...


@dataclass(frozen=True, slots=True)
class Env:
    """Bindings handed to the edge router with every request.

    ``assets`` is the static asset store; ``vars`` carries any extra
    bindings an upstream worker expects.
    """

    assets: AssetStore
    vars: dict[str, Any] | None = None


class DirectoryAssets:
    """Serve files from a build output directory.

    Security: resolves symlinks and verifies the final path is within the
    configured directory to prevent path traversal. Top-level names in
    *hidden* (the worker bundle, the routes manifest) answer 404.

    Usage::

        assets = DirectoryAssets("./dist")
        response = await assets.fetch("/users/__ACPS_id__/index.html")
    """

    __slots__ = ("_cache_control", "_directory", "_hidden", "_index")

    def __init__(
        self,
        directory: str | Path,
        *,
        index: str = "index.html",
        cache_control: str = "public, max-age=3600",
        hidden: Iterable[str] = (),
    ) -> None:
        self._directory = Path(directory).resolve()
        self._hidden = frozenset(hidden)
        self._index = index
        self._cache_control = cache_control

    @property
    def directory(self) -> Path:
        return self._directory

    async def fetch(self, path: str) -> Response:
        """Return the file at *path*, its directory index, or a 404."""
        relative = unquote(path.split("?", 1)[0]).lstrip("/")
        file_path = (self._directory / relative).resolve() if relative else self._directory
        if not file_path.is_relative_to(self._directory):
            return plain_text("Forbidden", 403)

        top = file_path.relative_to(self._directory).parts[:1]
        if top and top[0] in self._hidden:
            return plain_text("Not Found", 404)

        if file_path.is_dir():
            file_path = file_path / self._index

        if not file_path.is_file():
            return plain_text("Not Found", 404)

        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"
        elif content_type.startswith("text/"):
            content_type = f"{content_type}; charset=utf-8"

        body = file_path.read_bytes()
        return (
            Response(body=body, content_type=content_type)
            .with_header("Content-Length", str(len(body)))
            .with_header("Cache-Control", self._cache_control)
        )
