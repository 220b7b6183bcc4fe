"""Mount the documentation UI inside another ASGI application.

``mount()`` wraps a host app: requests under the docs base path go to a
``DocsApp``, everything else (lifespan included) goes to the host
unchanged::

    from plumage import DocsConfig, mount

    app = mount(api_app, DocsConfig(base_path="/doc", doc_path="openapi.json"))
"""

from plumage._internal.asgi import ASGIApp, Receive, Scope, Send
from plumage.app import DocsApp
from plumage.config import DocsConfig


class MountedDocs:
    """ASGI app that splits traffic between a host app and a ``DocsApp``."""

    __slots__ = ("_prefix", "app", "docs")

    def __init__(self, app: ASGIApp, docs: DocsApp) -> None:
        self.app = app
        self.docs = docs
        prefix = docs.base_path
        self._prefix = "" if prefix == "/" else prefix

    def matches(self, path: str) -> bool:
        """True if *path* belongs to the documentation UI."""
        if not self._prefix:
            return True
        return path == self._prefix or path.startswith(self._prefix + "/")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and self.matches(scope["path"]):
            await self.docs(scope, receive, send)
            return
        if scope["type"] == "lifespan":
            # The host owns the lifespan; docs are ready before it starts.
            self.docs.prepare()
        await self.app(scope, receive, send)


def mount(app: ASGIApp, docs: DocsApp | DocsConfig | None = None) -> MountedDocs:
    """Wrap *app* so the documentation UI answers under its base path."""
    if not isinstance(docs, DocsApp):
        docs = DocsApp(docs)
    return MountedDocs(app, docs)
