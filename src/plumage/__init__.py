"""Plumage: a themeable Swagger/OpenAPI documentation UI for ASGI apps.

Serves a bundled single-page UI in one of several themes, the API
specification (from disk or from memory), and a small runtime
configuration document the UI boots from.

Standalone::

    from plumage import DocsApp, DocsConfig

    app = DocsApp(DocsConfig(title="Pets API", doc_path="openapi.json"))
    app.run(port=8080)  # pip install plumage[serve]

Inside an existing ASGI app::

    from plumage import DocsConfig, mount

    app = mount(api_app, DocsConfig(base_path="/doc", doc_json=spec_bytes))
"""

__version__ = "0.1.0"
__all__ = [
    "AssetBundle",
    "ConfigurationError",
    "DocsApp",
    "DocsConfig",
    "DocsRouter",
    "Environment",
    "Forbidden",
    "GenerationOutcome",
    "HTTPError",
    "Header",
    "NotFound",
    "PlumageError",
    "Request",
    "Response",
    "THEMES",
    "Theme",
    "generate_docs",
    "mount",
    "resolve_theme",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import plumage`` fast while providing a clean top-level API.
    """
    if name == "DocsApp":
        from plumage.app import DocsApp

        return DocsApp

    if name in ("DocsConfig", "Header", "Environment"):
        from plumage import config as _config

        return getattr(_config, name)

    if name in ("Theme", "THEMES", "resolve_theme"):
        from plumage import themes as _themes

        return getattr(_themes, name)

    if name == "DocsRouter":
        from plumage.router import DocsRouter

        return DocsRouter

    if name == "AssetBundle":
        from plumage.assets import AssetBundle

        return AssetBundle

    if name in ("GenerationOutcome", "generate_docs"):
        from plumage import generator as _generator

        return getattr(_generator, name)

    if name == "mount":
        from plumage.mounting import mount

        return mount

    if name == "Request":
        from plumage.http.request import Request

        return Request

    if name == "Response":
        from plumage.http.response import Response

        return Response

    if name in ("PlumageError", "ConfigurationError", "HTTPError", "NotFound", "Forbidden"):
        from plumage import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
