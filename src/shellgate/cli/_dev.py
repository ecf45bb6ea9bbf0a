"""``shellgate dev``: development server.

Serves the public directory with ``StaticFiles`` and puts ``DevRouter``
in front of it, so dynamic URLs render from their shell on every request.
A ``PageWatcher`` rescans the pages directory while the server runs.
"""

import argparse

import httpx

from shellgate.cli._config import config_from_args
from shellgate.config import BuildConfig
from shellgate.middleware.dev_router import DevRouter
from shellgate.middleware.static import StaticFiles
from shellgate.pages.registry import RouteRegistry
from shellgate.pages.watcher import PageWatcher
from shellgate.server.app import ShellApp


def create_dev_app(
    config: BuildConfig,
    *,
    watch_interval: float = 0.5,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ShellApp:
    """Scan once, build the dev pipeline and watch for page changes."""
    registry = RouteRegistry(config)
    registry.scan()
    app = ShellApp(
        middleware=[
            DevRouter(registry, transport=transport),
            StaticFiles(config.public_path),
        ]
    )
    watcher = PageWatcher(registry, interval=watch_interval)
    app.on_startup(watcher.start)
    app.on_shutdown(watcher.stop)
    return app


def run_dev(args: argparse.Namespace) -> None:
    config = config_from_args(args)
    app = create_dev_app(config)

    from shellgate.server.dev import run_dev_server

    run_dev_server(app, config.host, config.port)
