"""ASGI handler: translates ASGI scope/messages to plumage types.

The only component besides the app that touches raw ASGI. Converts the
scope dict to a typed Request, dispatches through the documentation
router, and sends the Response back through ASGI send().
"""

from plumage._internal.asgi import Receive, Scope, Send
from plumage.errors import HTTPError
from plumage.http.request import Request
from plumage.router import DocsRouter
from plumage.server.errors import handle_http_error, handle_internal_error
from plumage.server.sender import send_response
from plumage.static import redirect_to_slash


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    router: DocsRouter,
) -> None:
    """Process a single HTTP request."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    base_path = router.config.base_path

    # The UI loads its assets through relative URLs, which only resolve
    # below the base path when it ends in a slash.
    if base_path != "/" and request.path == base_path:
        await send_response(redirect_to_slash(request), send, method=request.method)
        return

    try:
        response = await router.dispatch(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, method=request.method)
