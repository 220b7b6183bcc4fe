"""Static asset serving out of an in-memory namespace.

Behaves like a conventional static file server: directory requests resolve
to an index file, directories requested without a trailing slash redirect,
and paths that try to climb out of the namespace are refused.
"""

import mimetypes
from urllib.parse import quote

from plumage.assets import AssetNamespace
from plumage.errors import Forbidden, NotFound
from plumage.http.request import Request
from plumage.http.response import Response

DEFAULT_INDEX = "index.html"
DEFAULT_CACHE_CONTROL = "no-cache"


def redirect_to_slash(request: Request) -> Response:
    """301 to the slash-terminated form of the URL the client used.

    The decoded ASGI path is percent-encoded again so the ``Location``
    header stays ASCII; the query string is kept as received.
    """
    location = quote(request.path + "/")
    if request.query.raw:
        location += "?" + request.query.raw.decode("latin-1")
    return Response(body="", status=301).with_header("Location", location)


def serve_asset(
    namespace: AssetNamespace,
    path: str,
    request: Request,
    *,
    index: str = DEFAULT_INDEX,
    cache_control: str = DEFAULT_CACHE_CONTROL,
) -> Response:
    """Serve *path* (relative to *namespace*) as a response.

    *request* is only consulted to build redirect locations, which must
    point at the URL the client actually used (base path included).

    Raises:
        Forbidden: *path* contains a ``..`` segment.
        NotFound: nothing in *namespace* matches *path*.
    """
    segments = [part for part in path.split("/") if part not in ("", ".")]
    if ".." in segments:
        raise Forbidden()
    key = "/".join(segments)

    if namespace.is_dir(key):
        index_key = f"{key}/{index}" if key else index
        if index_key not in namespace:
            raise NotFound(f"No index in {namespace.name}/{key}")
        # Relative links inside the index only resolve below a trailing slash
        if key and not path.endswith("/"):
            return redirect_to_slash(request)
        key = index_key

    try:
        body = namespace[key]
    except KeyError:
        raise NotFound(f"{namespace.name}/{key}") from None

    content_type, _ = mimetypes.guess_type(key)
    if content_type is None:
        content_type = "application/octet-stream"
    elif content_type.startswith("text/") or content_type == "application/javascript":
        content_type += "; charset=utf-8"

    return Response(body=body, content_type=content_type).with_header(
        "Cache-Control", cache_control
    )
