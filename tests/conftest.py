"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from wiredriver.diagnostics.screenshot_sink import FileScreenshotSink
from wiredriver.session.remote_session import RemoteSession
from wiredriver.transport.httpx_transport import HttpxTransport

EXECUTOR = "http://wire.test/wd/hub"
SESSION_ID = "sess-1"

# 1x1 transparent PNG
PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def envelope(value: Any = None, status: int = 0, session_id: str | None = SESSION_ID) -> dict:
    return {"sessionId": session_id, "status": status, "value": value}


class FakeWireServer:
    """In-memory remote end for ``httpx.MockTransport``.

    Routes map ``(method, path)`` (path relative to the executor) to either a
    ``(http_status, payload)`` pair or a callable taking the request.
    Unrouted requests get HTTP 404 with status 9 (unknown command).
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def reply(
        self,
        method: str,
        path: str,
        value: Any = None,
        *,
        status: int = 0,
        http_status: int = 200,
        session_id: str | None = SESSION_ID,
    ) -> None:
        self.routes[(method, path)] = (http_status, envelope(value, status, session_id))

    def route(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method, path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        prefix = httpx.URL(EXECUTOR).path
        if path.startswith(prefix):
            path = path[len(prefix):]
        target = self.routes.get((request.method, path))
        if target is None:
            return httpx.Response(404, json=envelope({"message": "no route"}, status=9))
        if callable(target):
            return target(request)
        http_status, payload = target
        return httpx.Response(http_status, json=payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def paths(self) -> list[str]:
        return [f"{r.method} {r.url.path}" for r in self.requests]


@pytest.fixture()
def server() -> FakeWireServer:
    return FakeWireServer()


@pytest.fixture()
def transport(server):
    t = HttpxTransport(transport=httpx.MockTransport(server.handler))
    yield t
    t.close()


@pytest.fixture()
def sink(tmp_path) -> FileScreenshotSink:
    return FileScreenshotSink(tmp_path / "shots")


@pytest.fixture()
def session(transport, sink) -> RemoteSession:
    """An unstarted session wired to the fake server."""
    return RemoteSession(
        EXECUTOR, {"browserName": "chrome"}, transport=transport, screenshot_sink=sink
    )


@pytest.fixture()
def active_session(session, server) -> RemoteSession:
    server.reply("POST", "/session", {"browserName": "chrome", "javascriptEnabled": True})
    session.start()
    return session


@pytest.fixture()
def tmp_settings_yaml(tmp_path):
    """Write a minimal wiredriver.yaml and return its path."""
    content = """\
executor: "http://grid.local:4444/wd/hub/"
capabilities:
  browserName: "firefox"
  takesScreenshot: false
max_redirects: 5
read_timeout: 30
screenshot_dir: "{shots}"
log_level: "debug"
""".format(shots=str(tmp_path / "shots"))
    p = tmp_path / "wiredriver.yaml"
    p.write_text(content)
    return p
