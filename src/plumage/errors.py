"""Plumage exception hierarchy.

Shared across config, router, static serving and the ASGI handler so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class PlumageError(Exception):
    """Base for all plumage-specific errors."""


class ConfigurationError(PlumageError):
    """Raised when a ``DocsConfig`` (or a CLI value feeding it) is invalid.

    Raised at construction time, never while serving requests.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(PlumageError):
    """An error that maps directly to an HTTP status code.

    Raised by static serving. The ASGI handler catches these and turns
    them into a response with the same status and headers.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: the requested asset does not exist in the selected namespace."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class Forbidden(HTTPError):  # noqa: N818
    """403: the requested path escapes its asset namespace."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(status=403, detail=detail)
