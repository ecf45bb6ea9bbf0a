"""Shellgate: dynamic routes for pre-rendered static sites.

Pages with parameters in their path (``pages/users/[id].page``) are
rendered once as a shell with ``__ACPS_id__`` placeholders. At request
time a router matches the URL, loads the shell and substitutes the
escaped parameter values.

Edge usage::

    from shellgate import DirectoryAssets, EdgeRouter, Env

    router = EdgeRouter([
        {"pattern": "^/users/([^/]+)$", "shellPath": "/users/__ACPS_id__/index", "params": ["id"]},
    ])
    app = router.asgi(Env(assets=DirectoryAssets("dist")))

Build usage::

    from shellgate import BuildConfig, emit_build, scan_routes

    config = BuildConfig(root="site")
    emit_build(config, scan_routes(config))
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "BuildConfig",
    "ConfigurationError",
    "DevRouter",
    "DirectoryAssets",
    "DynamicRoute",
    "EdgeRouter",
    "Env",
    "HTTPError",
    "NotFound",
    "Request",
    "Response",
    "RouteCompiler",
    "RouteRegistry",
    "RouteTable",
    "ShellApp",
    "ShellgateError",
    "StaticFiles",
    "WorkerChainConfig",
    "emit_build",
    "escape_html",
    "scan_routes",
    "setup_worker_chain",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import shellgate`` cheap inside a deployed worker, which only
    needs the edge router.
    """
    if name == "BuildConfig":
        from shellgate.config import BuildConfig

        return BuildConfig

    if name == "EdgeRouter":
        from shellgate.edge import EdgeRouter

        return EdgeRouter

    if name in ("DirectoryAssets", "Env"):
        from shellgate import assets as _assets

        return getattr(_assets, name)

    if name == "escape_html":
        from shellgate.escape import escape_html

        return escape_html

    if name in ("Request", "Response"):
        from shellgate import http as _http

        return getattr(_http, name)

    if name in ("DynamicRoute", "RouteCompiler", "RouteTable"):
        from shellgate import routing as _routing

        return getattr(_routing, name)

    if name in ("RouteRegistry", "scan_routes"):
        from shellgate import pages as _pages

        return getattr(_pages, name)

    if name in ("DevRouter", "StaticFiles"):
        from shellgate import middleware as _mw

        return getattr(_mw, name)

    if name == "ShellApp":
        from shellgate.server.app import ShellApp

        return ShellApp

    if name == "emit_build":
        from shellgate.emit import emit_build

        return emit_build

    if name in ("WorkerChainConfig", "setup_worker_chain"):
        from shellgate.worker import chain as _chain

        return getattr(_chain, name)

    if name in ("ConfigurationError", "HTTPError", "NotFound", "ShellgateError"):
        from shellgate import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
