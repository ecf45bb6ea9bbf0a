"""Polling page watcher for the dev server.

Keeps the route registry in step with the pages directory: when a page
file is added, removed or edited, the registry is rescanned and the dev
router picks up the new table on its next request.
"""

import asyncio
import contextlib
import logging

from shellgate.pages.registry import RouteRegistry

logger = logging.getLogger("shellgate.dev")


class PageWatcher:
    """Rescan *registry* whenever a page file changes.

    Usage::

        watcher = PageWatcher(registry)
        app.on_startup(watcher.start)
        app.on_shutdown(watcher.stop)
    """

    __slots__ = ("_interval", "_registry", "_snapshot", "_task")

    def __init__(self, registry: RouteRegistry, *, interval: float = 0.5) -> None:
        self._registry = registry
        self._interval = interval
        self._snapshot = self._take_snapshot()
        self._task: asyncio.Task[None] | None = None

    def _take_snapshot(self) -> dict[str, int]:
        pages_dir = self._registry.config.pages_path
        if not pages_dir.is_dir():
            return {}
        files: dict[str, int] = {}
        for path in pages_dir.rglob("*"):
            if not self._registry.is_page(path):
                continue
            try:
                files[path.as_posix()] = path.stat().st_mtime_ns
            except FileNotFoundError:
                continue  # removed mid-walk
        return files

    def poll(self) -> bool:
        """Compare against the last snapshot; rescan and return True on change."""
        try:
            current = self._take_snapshot()
        except OSError as exc:
            logger.warning("Failed to watch pages directory: %s", exc)
            return False

        if current == self._snapshot:
            return False

        added = current.keys() - self._snapshot.keys()
        removed = self._snapshot.keys() - current.keys()
        logger.debug("Page files changed (%d added, %d removed)", len(added), len(removed))
        self._snapshot = current
        self._registry.scan()
        return True

    async def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            await asyncio.to_thread(self.poll)
