"""Shellgate exception hierarchy.

Shared across the compiler, the routers, and the build emitters so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class ShellgateError(Exception):
    """Base for all shellgate-specific errors."""


class ConfigurationError(ShellgateError):
    """Raised when build configuration is invalid.

    Raised while constructing ``BuildConfig``, before any request is served.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(ShellgateError):
    """An error that maps directly to an HTTP status code.

    Raised by request handlers. ``ShellApp`` catches these and turns them
    into plain responses with the matching status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818: conventional name in web frameworks
    """404: nothing could serve the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class URITooLong(HTTPError):  # noqa: N818: conventional name in web frameworks
    """414: request path exceeds the routing length ceiling."""

    def __init__(self, detail: str = "URL Too Long") -> None:
        super().__init__(status=414, detail=detail)
