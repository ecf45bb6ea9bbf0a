"""Error handling for the middleware pipeline.

Maps HTTPError exceptions and unexpected failures to plain responses.
Internal error text is logged, never sent to the client.
"""

import logging

from shellgate.errors import HTTPError
from shellgate.http.request import Request
from shellgate.http.response import Response, plain_text

logger = logging.getLogger("shellgate.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response with its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    response = plain_text(exc.detail or f"Error {exc.status}", exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    return plain_text("Internal Server Error", 500)
