"""Development and preview servers.

Both start a single-worker pounce ASGI server with a live application
object built from CLI arguments.
"""

from shellgate._internal.asgi import ASGIApp


def run_dev_server(app: ASGIApp, host: str, port: int) -> None:
    """Start a single-worker pounce server for *app*.

    Pounce's ``run()`` takes an import string, but shellgate builds its
    app at runtime. We use ``pounce.Server`` directly with the ASGI
    callable. Reload stays off: the app is not importable by name. Page
    changes are picked up by the app's own watcher, started through the
    ASGI lifespan.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=False)
    server = Server(config, app)
    server.run()
