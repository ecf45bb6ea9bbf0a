"""Shared fixtures: a small site with static and dynamic pages."""

from pathlib import Path

import pytest

from shellgate.config import BuildConfig
from shellgate.http.response import Response


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a project root with ``src/pages`` and a rendered ``dist``."""
    pages = tmp_path / "src" / "pages"
    (pages / "users").mkdir(parents=True)
    (pages / "blog").mkdir()
    (pages / "api").mkdir()
    (pages / "products").mkdir()
    (pages / "_drafts").mkdir()

    (pages / "index.page").write_text("<h1>Home</h1>")
    (pages / "about.page").write_text("<h1>About</h1>")
    (pages / "notes.txt").write_text("not a page")
    (pages / "users" / "[id].page").write_text("<h1>User {{ id }}</h1>")
    (pages / "blog" / "[...slug].page").write_text("<article>{{ slug }}</article>")
    (pages / "api" / "[id].json.py").write_text("def get(request):\n    return {}\n")
    (pages / "products" / "[sku].page").write_text(
        "---\ndef get_static_paths():\n    return [{'params': {'sku': 'a1'}}]\n---\n<h1>{{ sku }}</h1>"
    )
    (pages / "_drafts" / "[x].page").write_text("draft")

    dist = tmp_path / "dist"
    (dist / "users" / "__ACPS_id__").mkdir(parents=True)
    (dist / "blog" / "__ACPS_slug__").mkdir(parents=True)
    (dist / "about").mkdir()
    (dist / "users" / "__ACPS_id__" / "index.html").write_text("<h1>User __ACPS_id__</h1>")
    (dist / "blog" / "__ACPS_slug__" / "index.html").write_text("<article>__ACPS_slug__</article>")
    (dist / "about" / "index.html").write_text("<h1>About</h1>")
    (dist / "style.css").write_text("body { color: red; }")

    return tmp_path


@pytest.fixture
def config(project: Path) -> BuildConfig:
    return BuildConfig(root=project)


class FakeAssets:
    """In-memory asset store that records every fetch."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = files or {}
        self.requested: list[str] = []

    async def fetch(self, path: str) -> Response:
        self.requested.append(path)
        if path in self.files:
            return Response(body=self.files[path])
        return Response(body="Not Found", status=404, content_type="text/plain; charset=utf-8")


@pytest.fixture
def fake_assets() -> type[FakeAssets]:
    return FakeAssets
