"""Tests for shellgate.pages: discovery, scanning, registry and stubs."""

import shutil
from pathlib import Path

import pytest

from shellgate.config import BuildConfig
from shellgate.pages.discovery import discover_page_files, scan_routes
from shellgate.pages.inject import (
    declares_static_paths,
    inject_static_paths,
    render_static_paths_stub,
)
from shellgate.pages.registry import RouteRegistry
from shellgate.pages.watcher import PageWatcher


class TestDiscovery:
    def test_files_before_directories(self, config: BuildConfig) -> None:
        files = discover_page_files(config.pages_path, config.page_suffixes)
        assert files == [
            "about.page",
            "index.page",
            "api/[id].json.py",
            "blog/[...slug].page",
            "products/[sku].page",
            "users/[id].page",
        ]

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            discover_page_files(tmp_path / "nope", (".page",))


class TestScanRoutes:
    def test_dynamic_pages_only(self, config: BuildConfig) -> None:
        routes = scan_routes(config)
        assert [r.route for r in routes] == ["/api/:id.json", "/blog/:slug*", "/users/:id"]

    def test_static_paths_declaration_excludes_page(self, config: BuildConfig) -> None:
        files = [r.file for r in scan_routes(config)]
        assert "products/[sku].page" not in files

    def test_private_directories_skipped(self, config: BuildConfig) -> None:
        assert all(not r.file.startswith("_") for r in scan_routes(config))

    def test_source_that_is_not_utf8(self, config: BuildConfig) -> None:
        (config.pages_path / "tags").mkdir()
        (config.pages_path / "tags" / "[tag].page").write_bytes(b"<h1>\xff\xfe caf\xe9</h1>")

        routes = scan_routes(config)

        assert "/tags/:tag" in [r.route for r in routes]


class TestInject:
    def test_stub_content(self) -> None:
        stub = render_static_paths_stub(["id", "slug"])
        assert "def get_static_paths():" in stub
        assert '{"params": {"id": "__ACPS_id__", "slug": "__ACPS_slug__"}}' in stub

    def test_appends_stub(self) -> None:
        source = "<h1>{{ id }}</h1>"
        result = inject_static_paths(source, ["id"])
        assert result is not None
        assert result.startswith(source)
        assert declares_static_paths(result)

    def test_no_params(self) -> None:
        assert inject_static_paths("<h1>Hi</h1>", []) is None

    def test_existing_declaration(self) -> None:
        source = "def get_static_paths():\n    return []\n"
        assert inject_static_paths(source, ["id"]) is None

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("def get_static_paths():", True),
            ("async def get_static_paths(", True),
            ("    def get_static_paths (self):", True),
            ("get_static_paths = None", False),
            ("def get_static_paths_cached():", False),
            ("# call get_static_paths() later", False),
        ],
    )
    def test_declaration_detection(self, source: str, expected: bool) -> None:
        assert declares_static_paths(source) is expected


class TestRouteRegistry:
    def test_scan_publishes_table(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        assert len(registry.table) == 0

        routes = registry.scan()

        assert len(routes) == 3
        assert registry.table.match("/users/42").params == {"id": "42"}
        assert registry.get("users/[id].page").shell_path == "/users/__ACPS_id__/index"
        assert registry.get("about.page") is None

    def test_rescan_picks_up_new_pages(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        registry.scan()
        old_table = registry.table

        (config.pages_path / "tags").mkdir()
        (config.pages_path / "tags" / "[tag].page").write_text("<h1>tag</h1>")
        registry.scan()

        assert registry.table.match("/tags/python") is not None
        assert old_table.match("/tags/python") is None

    def test_failed_scan_keeps_previous_routes(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        registry.scan()

        shutil.rmtree(config.pages_path)
        routes = registry.scan()

        assert len(routes) == 3
        assert registry.table.match("/users/1") is not None

    def test_transform_dynamic_page(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        registry.scan()

        result = registry.transform("users/[id].page", "<h1>{{ id }}</h1>")

        assert result is not None
        assert '"id": "__ACPS_id__"' in result

    def test_transform_other_pages(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        registry.scan()

        assert registry.transform("about.page", "<h1>About</h1>") is None
        assert registry.transform("products/[sku].page", "def get_static_paths(): ...") is None

    def test_is_page(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        pages = config.pages_path

        assert registry.is_page(pages / "users" / "[id].page")
        assert registry.is_page(pages / "api" / "[id].json.py")
        assert not registry.is_page(pages / "notes.txt")
        assert not registry.is_page(config.out_path / "about" / "index.html")


class TestPageWatcher:
    def test_new_page_triggers_rescan(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        registry.scan()
        watcher = PageWatcher(registry)
        assert not watcher.poll()

        (config.pages_path / "tags").mkdir()
        (config.pages_path / "tags" / "[tag].page").write_text("<h1>tag</h1>")

        assert watcher.poll()
        assert registry.table.match("/tags/python").params == {"tag": "python"}
        assert not watcher.poll()

    def test_removed_page_triggers_rescan(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        registry.scan()
        watcher = PageWatcher(registry)

        (config.pages_path / "users" / "[id].page").unlink()

        assert watcher.poll()
        assert registry.table.match("/users/1") is None

    def test_other_files_ignored(self, config: BuildConfig) -> None:
        registry = RouteRegistry(config)
        registry.scan()
        watcher = PageWatcher(registry)

        (config.pages_path / "todo.txt").write_text("later")

        assert not watcher.poll()

    async def test_start_and_stop(self, config: BuildConfig) -> None:
        watcher = PageWatcher(RouteRegistry(config), interval=0.01)
        await watcher.start()
        await watcher.stop()
        await watcher.stop()
