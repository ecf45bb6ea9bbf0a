"""Tests for StaticFiles, DirectoryAssets and the ShellApp pipeline."""

from pathlib import Path

import pytest

from shellgate.assets import DirectoryAssets
from shellgate.errors import HTTPError
from shellgate.http.request import Request
from shellgate.http.response import Response
from shellgate.middleware.static import StaticFiles
from shellgate.server.app import ShellApp
from shellgate.testing import TestClient


@pytest.fixture
def public(tmp_path: Path) -> Path:
    root = tmp_path / "public"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "index.html").write_text("<h1>Docs</h1>")
    (root / "contact.html").write_text("<h1>Contact</h1>")
    (root / "app.js").write_text("console.log(1)")
    (tmp_path / "secret.txt").write_text("do not serve")
    return root


class TestDirectoryAssets:
    async def test_file(self, public: Path) -> None:
        response = await DirectoryAssets(public).fetch("/contact.html")
        assert response.status == 200
        assert response.text == "<h1>Contact</h1>"
        assert response.header("Cache-Control") == "public, max-age=3600"

    async def test_directory_index(self, public: Path) -> None:
        response = await DirectoryAssets(public).fetch("/docs/")
        assert response.text == "<h1>Docs</h1>"

    async def test_percent_encoded_name(self, public: Path) -> None:
        (public / "a b.html").write_text("spaced")
        response = await DirectoryAssets(public).fetch("/a%20b.html")
        assert response.text == "spaced"

    async def test_missing(self, public: Path) -> None:
        response = await DirectoryAssets(public).fetch("/nope.html")
        assert response.status == 404

    async def test_traversal_forbidden(self, public: Path) -> None:
        response = await DirectoryAssets(public).fetch("/../secret.txt")
        assert response.status == 403

    async def test_hidden_names(self, public: Path) -> None:
        (public / "_worker.py").mkdir()
        (public / "_worker.py" / "index.py").write_text("secret = 1")
        (public / "_routes.json").write_text("{}")
        assets = DirectoryAssets(public, hidden=("_worker.py", "_routes.json"))

        assert (await assets.fetch("/_worker.py/index.py")).status == 404
        assert (await assets.fetch("/%5Fworker.py/index.py")).status == 404
        assert (await assets.fetch("/docs/../_routes.json")).status == 404
        assert (await assets.fetch("/contact.html")).status == 200


class TestStaticFiles:
    async def test_serves_and_falls_through(self, public: Path) -> None:
        app = ShellApp(middleware=[StaticFiles(public)])

        async with TestClient(app) as client:
            script = await client.get("/app.js")
            missing = await client.get("/missing.js")

        assert script.status == 200
        assert script.header("cache-control") == "no-cache"
        assert missing.status == 404

    async def test_extensionless_html(self, public: Path) -> None:
        app = ShellApp(middleware=[StaticFiles(public)])

        async with TestClient(app) as client:
            response = await client.get("/contact")

        assert response.text == "<h1>Contact</h1>"

    async def test_other_methods_fall_through(self, public: Path) -> None:
        app = ShellApp(middleware=[StaticFiles(public)])

        async with TestClient(app) as client:
            response = await client.request("POST", "/contact.html")

        assert response.status == 404


class TestShellApp:
    async def test_middleware_order(self) -> None:
        order: list[str] = []

        def tag(name: str):
            async def mw(request: Request, next) -> Response:
                order.append(name)
                return await next(request)

            return mw

        async def handler(request: Request) -> Response:
            order.append("handler")
            return Response(body="done")

        app = ShellApp(middleware=[tag("outer"), tag("inner")], handler=handler)

        async with TestClient(app) as client:
            response = await client.get("/")

        assert response.text == "done"
        assert order == ["outer", "inner", "handler"]

    async def test_http_error_maps_to_status(self) -> None:
        async def handler(request: Request) -> Response:
            raise HTTPError(status=418, detail="teapot", headers=(("X-Why", "tea"),))

        async with TestClient(ShellApp(handler=handler)) as client:
            response = await client.get("/")

        assert response.status == 418
        assert response.text == "teapot"
        assert response.header("x-why") == "tea"

    async def test_unexpected_error_is_500(self) -> None:
        async def handler(request: Request) -> Response:
            raise RuntimeError("boom")

        async with TestClient(ShellApp(handler=handler)) as client:
            response = await client.get("/")

        assert response.status == 500
        assert response.text == "Internal Server Error"

    async def test_lifespan(self) -> None:
        messages = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(messages)

        async def send(message: dict) -> None:
            sent.append(message)

        await ShellApp()({"type": "lifespan"}, receive, send)

        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]

    async def test_lifespan_hooks(self) -> None:
        calls: list[str] = []
        app = ShellApp()

        @app.on_startup
        async def start() -> None:
            calls.append("start")

        @app.on_shutdown
        def stop() -> None:
            calls.append("stop")

        messages = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(messages)

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert calls == ["start", "stop"]
        assert sent[-1]["type"] == "lifespan.shutdown.complete"

    async def test_failed_startup_hook(self) -> None:
        app = ShellApp()

        @app.on_startup
        def start() -> None:
            raise RuntimeError("no pages")

        sent: list[dict] = []

        async def receive() -> dict:
            return {"type": "lifespan.startup"}

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert sent == [{"type": "lifespan.startup.failed", "message": "no pages"}]
