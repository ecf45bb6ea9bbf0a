"""Page discovery, scanning and source preparation."""

from shellgate.pages.discovery import discover_page_files, scan_routes
from shellgate.pages.inject import declares_static_paths, inject_static_paths
from shellgate.pages.registry import RouteRegistry
from shellgate.pages.watcher import PageWatcher

__all__ = [
    "PageWatcher",
    "RouteRegistry",
    "declares_static_paths",
    "discover_page_files",
    "inject_static_paths",
    "scan_routes",
]
