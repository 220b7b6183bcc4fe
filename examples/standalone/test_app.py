"""Tests for the standalone example."""

from plumage.testing import TestClient


class TestStandaloneApp:
    """Every documentation endpoint through the ASGI pipeline."""

    async def test_entry_page_uses_configured_theme(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/doc/")
            assert response.status == 200
            assert "text/html" in response.content_type
            assert 'class="plumage-theme-modern"' in response.text

    async def test_theme_query_switches_page(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/doc/", query={"theme": "minimal"})
            assert 'class="plumage-theme-minimal"' in response.text

    async def test_unknown_theme_falls_back(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/doc/", query={"theme": "neon"})
            assert 'class="plumage-theme-modern"' in response.text

    async def test_specification(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/doc/swagger.json")
            assert response.status == 200
            assert response.content_type == "application/json"
            assert response.json()["info"]["title"] == "Pets API"

    async def test_api_docs_alias(self, example_app) -> None:
        async with TestClient(example_app) as client:
            spec = await client.get("/doc/swagger.json")
            alias = await client.get("/doc/api-docs")
            assert alias.body == spec.body

    async def test_runtime_config(self, example_app) -> None:
        async with TestClient(example_app) as client:
            doc = (await client.get("/doc/config.json")).json()
            assert doc["title"] == "Pets API"
            assert doc["defaultTheme"] == "modern"
            assert doc["themes"] == ["default", "minimal", "modern"]
            assert doc["globalHeaders"] == [{"key": "X-Client", "value": "plumage-example"}]
            assert [env["name"] for env in doc["environments"]] == ["local", "staging"]

    async def test_shared_assets(self, example_app) -> None:
        async with TestClient(example_app) as client:
            css = await client.get("/doc/assets/css/plumage.css")
            js = await client.get("/doc/assets/js/plumage.js", query={"theme": "minimal"})
            assert css.status == 200
            assert "text/css" in css.content_type
            assert js.status == 200
            assert "config.json" in js.text

    async def test_missing_asset(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/doc/assets/nope.js")
            assert response.status == 404
