"""Documentation request router.

Decides, per request, between the specification document, the runtime
configuration document, a shared asset and a theme asset. Everything it
reads is composed once at construction and never mutated afterwards.
"""

import logging

import anyio

from plumage.assets import SHARED_NAMESPACE, AssetBundle, default_bundle
from plumage.config import DocsConfig
from plumage.http.request import Request
from plumage.http.response import JSON_CONTENT_TYPE, Response
from plumage.runtime import encode_runtime_document
from plumage.static import serve_asset
from plumage.themes import THEMES, resolve_theme

logger = logging.getLogger("plumage.server")

SPEC_PATHS = frozenset({"/swagger.json", "/api-docs"})
CONFIG_PATH = "/config.json"
ASSETS_PREFIX = "/assets/"
SPEC_NOT_FOUND_BODY = b'{"error": "swagger.json not found"}'


def normalize_path(path: str, base_path: str) -> str:
    """Strip *base_path* from *path*; an empty remainder becomes ``/``.

    A root or empty base path strips nothing::

        normalize_path("/doc/config.json", "/doc")  -> "/config.json"
        normalize_path("/doc", "/doc")              -> "/"
        normalize_path("/config.json", "/")         -> "/config.json"
    """
    if base_path and base_path != "/" and path.startswith(base_path):
        path = path[len(base_path) :]
    return path or "/"


class DocsRouter:
    """Routes documentation requests against a fixed configuration.

    Thread safety:
        Construction composes all state (theme, config document bytes,
        namespace views). ``dispatch`` only reads it, so one router can
        serve any number of concurrent requests without locking.
    """

    __slots__ = (
        "_config_json",
        "_default_theme",
        "_shared",
        "_themes",
        "config",
    )

    def __init__(self, config: DocsConfig, bundle: AssetBundle | None = None) -> None:
        self.config = config
        bundle = bundle if bundle is not None else default_bundle()
        self._default_theme = config.default_theme
        self._config_json = encode_runtime_document(config)
        self._themes = {theme: bundle.namespace(theme) for theme in THEMES}
        self._shared = bundle.namespace(SHARED_NAMESPACE)

    @property
    def config_json(self) -> bytes:
        """The precomputed ``config.json`` body."""
        return self._config_json

    async def dispatch(self, request: Request) -> Response:
        """Produce the response for *request*.

        Raises:
            NotFound: a static asset does not exist.
            Forbidden: a static path escapes its namespace.
        """
        path = normalize_path(request.path, self.config.base_path)

        if path in SPEC_PATHS:
            return await self._specification()

        if path == CONFIG_PATH:
            return Response(body=self._config_json, content_type=JSON_CONTENT_TYPE)

        if path.startswith(ASSETS_PREFIX):
            return serve_asset(self._shared, path[len(ASSETS_PREFIX) - 1 :], request)

        theme = resolve_theme(request.query.get("theme"), self._themes, self._default_theme)
        return serve_asset(self._themes[theme], path, request)

    async def _specification(self) -> Response:
        """The API specification: in-memory bytes first, then the file."""
        if self.config.doc_json is not None:
            return Response(body=self.config.doc_json, content_type=JSON_CONTENT_TYPE)
        try:
            body = await anyio.Path(self.config.doc_path).read_bytes()
        except OSError as exc:
            logger.debug("specification unavailable at %s: %s", self.config.doc_path, exc)
            return Response(
                body=SPEC_NOT_FOUND_BODY,
                status=404,
                content_type=JSON_CONTENT_TYPE,
            )
        return Response(body=body, content_type=JSON_CONTENT_TYPE)
