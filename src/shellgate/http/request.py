"""Immutable HTTP request.

Frozen metadata only. Neither router reads a request body, so the
request is built once from the ASGI scope and never changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shellgate.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` keeps percent-escapes intact. Parameter decoding belongs to the
    route table, which must see the raw segments to reject malformed ones.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query_string: bytes = b""
    scheme: str = "http"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    @property
    def host(self) -> str | None:
        """The Host header value."""
        return self.headers.get("host")

    @property
    def url(self) -> str:
        """Request target (path + query string)."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI scope.

        Prefers ``raw_path`` over ``path``: servers hand over ``path``
        already percent-decoded.
        """
        raw_path = scope.get("raw_path")
        if raw_path:
            path = raw_path.decode("latin-1").split("?", 1)[0]
        else:
            path = scope["path"]
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=path,
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            scheme=scope.get("scheme", "http"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
