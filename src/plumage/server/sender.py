"""Turn a plumage ``Response`` into the two ASGI response messages."""

from plumage._internal.asgi import Send
from plumage.http.response import Response

# Informational, No Content and Not Modified responses carry no body
_BODYLESS = frozenset({204, 304})


def encode_headers(response: Response, body_length: int) -> list[tuple[bytes, bytes]]:
    """ASGI header pairs: content type, the response's own headers, length."""
    pairs = [("content-type", response.content_type)]
    pairs.extend((name.lower(), value) for name, value in response.headers)
    pairs.append(("content-length", str(body_length)))
    return [(name.encode("latin-1"), value.encode("latin-1")) for name, value in pairs]


async def send_response(response: Response, send: Send, *, method: str = "GET") -> None:
    """Send ``http.response.start`` followed by a single body message.

    ``HEAD`` answers keep the ``content-length`` of the full body but send
    no body bytes.
    """
    status = response.status
    if status < 200 or status in _BODYLESS:
        body = b""
    else:
        body = response.body_bytes

    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": encode_headers(response, len(body)),
        }
    )
    await send({"type": "http.response.body", "body": b"" if method == "HEAD" else body})
