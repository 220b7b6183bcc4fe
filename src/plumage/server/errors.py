"""Error handling pipeline for documentation requests.

Maps HTTPError exceptions and unexpected failures to plain-text
responses. Nothing here ever re-raises: the worst a request can get
is an error status.
"""

import logging

from plumage.errors import HTTPError
from plumage.http.request import Request
from plumage.http.response import Response

logger = logging.getLogger("plumage.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response with its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    resp = Response(body=detail).with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s: %s", request.method, request.path, exc)
    return Response(body="Internal Server Error", status=500)
