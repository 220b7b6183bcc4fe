"""The plumage ASGI application.

Inert until prepared. Preparation runs the optional documentation
generator and then builds the router, strictly in that order, exactly
once: on ASGI lifespan startup, on ``prepare()``, or on the first
request, whichever comes first.
"""

import threading

from plumage._internal.asgi import Receive, Scope, Send
from plumage.assets import AssetBundle
from plumage.config import DocsConfig
from plumage.generator import GenerationOutcome, generate_docs
from plumage.router import DocsRouter
from plumage.server.handler import handle_request


class DocsApp:
    """Serves the documentation UI for one ``DocsConfig``.

    Usage::

        from plumage import DocsApp, DocsConfig

        app = DocsApp(DocsConfig(title="Pets API", doc_path="openapi.json"))
        # any ASGI server: pounce, or app.run()

    Thread safety:
        Preparation uses a Lock + double-check so that exactly one thread
        runs the generator and builds the router, even when several ASGI
        workers hit the app concurrently on first request. After that the
        router is read-only.
    """

    __slots__ = ("_bundle", "_generation", "_prepare_lock", "_prepared", "_router", "config")

    def __init__(self, config: DocsConfig | None = None, *, bundle: AssetBundle | None = None) -> None:
        self.config: DocsConfig = config or DocsConfig()
        self._bundle = bundle
        self._router: DocsRouter | None = None
        self._generation: GenerationOutcome | None = None
        self._prepared: bool = False
        self._prepare_lock = threading.Lock()

    @property
    def base_path(self) -> str:
        return self.config.base_path

    @property
    def generation(self) -> GenerationOutcome | None:
        """Outcome of the startup generator, or None if it was not enabled."""
        return self._generation

    @property
    def router(self) -> DocsRouter:
        """The compiled router (prepares the app if needed)."""
        self.prepare()
        assert self._router is not None
        return self._router

    def prepare(self) -> None:
        """Run the startup phase once. Safe to call repeatedly."""
        if self._prepared:
            return
        with self._prepare_lock:
            if self._prepared:
                return
            if self.config.auto_generate:
                self._generation = generate_docs(self.config)
            self._router = DocsRouter(self.config, self._bundle)
            self._prepared = True

    # -- Server --

    def run(self, host: str = "127.0.0.1", port: int = 8000, *, log_level: str = "info") -> None:
        """Prepare the app and serve it with pounce."""
        self.prepare()

        from plumage.server.dev import run_server

        run_server(self, host, port, log_level=log_level)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self.prepare()
        assert self._router is not None

        await handle_request(scope, receive, send, router=self._router)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Prepares the app at startup so the generator finishes before the
        server accepts its first request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self.prepare()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
