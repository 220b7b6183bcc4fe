"""Standalone server.

Starts a pounce ASGI server with a live plumage app object. pounce is an
optional dependency (``pip install plumage[serve]``) and is only imported
here.
"""

from plumage.errors import ConfigurationError


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    workers: int = 1,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the given ASGI app.

    Pounce's ``run()`` takes an import string (e.g. ``"myapp:app"``), but
    here we hold a live app object, so ``pounce.Server`` is used directly
    with the ASGI callable.

    Args:
        app: ASGI callable (usually a ``DocsApp`` or a mounted host app).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count (0 = auto-detect).
        log_level: pounce log level.

    Raises:
        ConfigurationError: pounce is not installed.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError as exc:
        msg = "Serving requires pounce: pip install 'plumage[serve]'"
        raise ConfigurationError(msg) from exc

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
