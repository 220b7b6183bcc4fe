"""Tests for plumage.mounting: docs inside a host ASGI app."""

from urllib.parse import urljoin

from plumage.app import DocsApp
from plumage.assets import AssetBundle
from plumage.config import DocsConfig
from plumage.http.response import Response
from plumage.mounting import MountedDocs, mount
from plumage.server.sender import send_response
from plumage.testing import TestClient


async def host_app(scope, receive, send) -> None:
    """Minimal host API: answers every HTTP request with its own path."""
    if scope["type"] == "lifespan":
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
    await send_response(Response(body=f"host:{scope['path']}"), send)


class TestRouting:
    async def test_docs_under_base_path(self, bundle: AssetBundle) -> None:
        app = mount(host_app, DocsApp(DocsConfig(doc_json=b"{}"), bundle=bundle))

        async with TestClient(app) as client:
            spec = await client.get("/doc/swagger.json")
            page = await client.get("/doc/")
            assert spec.body == b"{}"
            assert page.text == "<h1>default</h1>"

    async def test_other_paths_reach_host(self, bundle: AssetBundle) -> None:
        app = mount(host_app, DocsApp(bundle=bundle))

        async with TestClient(app) as client:
            assert (await client.get("/pets")).text == "host:/pets"
            assert (await client.get("/")).text == "host:/"

    async def test_prefix_boundary(self, bundle: AssetBundle) -> None:
        app = mount(host_app, DocsApp(bundle=bundle))

        async with TestClient(app) as client:
            response = await client.get("/docs/index.html")
            assert response.text == "host:/docs/index.html"

    async def test_base_path_exact_redirects(self, bundle: AssetBundle) -> None:
        app = mount(host_app, DocsApp(bundle=bundle))

        async with TestClient(app) as client:
            response = await client.get("/doc", query={"theme": "modern"})
            assert response.status == 301
            assert response.header("location") == "/doc/?theme=modern"

    async def test_relative_ui_urls_stay_under_prefix(self) -> None:
        app = mount(host_app, DocsConfig(doc_json=b"{}"))

        async with TestClient(app) as client:
            location = (await client.get("/doc")).header("location")
            page = await client.get(location)
            assert 'href="assets/css/plumage.css"' in page.text

            for relative in ("assets/css/plumage.css", "assets/js/plumage.js", "config.json"):
                response = await client.get(urljoin(location, relative))
                assert response.status == 200, relative
                assert not response.text.startswith("host:")

    async def test_custom_base_path(self, bundle: AssetBundle) -> None:
        docs = DocsApp(DocsConfig(base_path="/api/docs"), bundle=bundle)
        app = mount(host_app, docs)

        async with TestClient(app) as client:
            assert (await client.get("/api/docs/config.json")).status == 200
            assert (await client.get("/doc/config.json")).text == "host:/doc/config.json"


class TestMountFactory:
    def test_accepts_config(self) -> None:
        app = mount(host_app, DocsConfig(base_path="/reference"))
        assert isinstance(app, MountedDocs)
        assert app.docs.base_path == "/reference"

    def test_defaults(self) -> None:
        app = mount(host_app)
        assert app.docs.base_path == "/doc"
        assert app.matches("/doc/x")
        assert not app.matches("/docx")

    def test_root_base_path_matches_everything(self) -> None:
        app = mount(host_app, DocsConfig(base_path="/"))
        assert app.matches("/anything")


class TestLifespan:
    async def test_forwarded_to_host_and_docs_prepared(self, bundle: AssetBundle) -> None:
        docs = DocsApp(bundle=bundle)
        app = mount(host_app, docs)
        incoming = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive():
            return next(incoming)

        async def send(message):
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]
        assert docs._router is not None
