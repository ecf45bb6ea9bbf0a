"""Immutable HTTP types shared by the edge and dev routers."""

from shellgate.http.headers import Headers
from shellgate.http.request import Request
from shellgate.http.response import Response

__all__ = ["Headers", "Request", "Response"]
