"""Route registry: the current scan result, replaced wholesale.

A scan builds a complete new snapshot (routes, table, file index) and
publishes it with a single attribute assignment. Readers holding the old
snapshot keep a consistent view; nobody sees a half-built table.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from shellgate.config import BuildConfig
from shellgate.pages.discovery import scan_routes
from shellgate.pages.inject import inject_static_paths
from shellgate.routing.compiler import RouteCompiler
from shellgate.routing.route import DynamicRoute
from shellgate.routing.table import RouteTable

logger = logging.getLogger("shellgate.build")


@dataclass(frozen=True, slots=True)
class _Snapshot:
    routes: tuple[DynamicRoute, ...] = ()
    table: RouteTable = field(default_factory=RouteTable)
    by_file: dict[str, DynamicRoute] = field(default_factory=dict)


class RouteRegistry:
    """Holds the dynamic routes of one project.

    Usage::

        registry = RouteRegistry(BuildConfig(root="site"))
        registry.scan()
        registry.table.match("/users/42")
    """

    __slots__ = ("_compiler", "_config", "_snapshot")

    def __init__(self, config: BuildConfig) -> None:
        self._config = config
        self._compiler = RouteCompiler(config)
        self._snapshot = _Snapshot()

    @property
    def config(self) -> BuildConfig:
        return self._config

    @property
    def compiler(self) -> RouteCompiler:
        return self._compiler

    @property
    def routes(self) -> tuple[DynamicRoute, ...]:
        return self._snapshot.routes

    @property
    def table(self) -> RouteTable:
        return self._snapshot.table

    def get(self, file: str) -> DynamicRoute | None:
        return self._snapshot.by_file.get(file)

    def is_page(self, path: str | Path) -> bool:
        """True if *path* is a page file inside the pages directory.

        A file watcher uses this to decide whether a change needs a rescan.
        """
        candidate = Path(path).resolve()
        pages_dir = self._config.pages_path.resolve()
        if not candidate.is_relative_to(pages_dir):
            return False
        return self._compiler.is_page(candidate.relative_to(pages_dir).as_posix())

    def scan(self) -> tuple[DynamicRoute, ...]:
        """Rescan the pages directory and publish the result.

        If the pages directory cannot be read, the previous routes stay
        in place.
        """
        try:
            routes = tuple(scan_routes(self._config, self._compiler))
        except OSError as exc:
            logger.warning("Failed to scan pages directory: %s", exc)
            return self._snapshot.routes

        self._snapshot = _Snapshot(
            routes=routes,
            table=RouteTable.from_routes(routes),
            by_file={route.file: route for route in routes},
        )
        logger.info("Detected %d potential dynamic routes.", len(routes))
        return routes

    def transform(self, file: str, source: str) -> str | None:
        """Inject a static-paths stub into a dynamic page's source.

        Returns None for pages that are not dynamic or need no change.
        """
        route = self.get(file)
        if route is None:
            return None
        params = self._compiler.extract_params_from_file(file)
        return inject_static_paths(source, params)
