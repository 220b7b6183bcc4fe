"""Immutable HTTP request.

Only what the documentation router reads: the method, the path and the
query string. Request bodies and headers are never consulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plumage.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the full request path as the server received it; base-path
    stripping is the router's job, not the request's.
    """

    method: str
    path: str
    query: QueryParams

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope.get("method", "GET"),
            path=scope["path"],
            query=QueryParams(scope.get("query_string", b"")),
        )
