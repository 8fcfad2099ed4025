# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Shared fixtures: a local HTTP server playing source host and graph store."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


@dataclass
class Response:
    status: int = 200
    body: bytes = b""
    content_type: str | None = "text/turtle"


@dataclass
class Recorded:
    method: str
    path: str
    headers: dict[str, str]
    body: bytes


@dataclass
class GraphServer:
    """Routes GET to canned responses and records everything it receives."""

    base_url: str = ""
    routes: dict[str, Response] = field(default_factory=dict)
    write_status: int = 204
    write_body: bytes = b""
    requests: list[Recorded] = field(default_factory=list)
    # Last accepted body per path, with PUT replacing and POST appending.
    graphs: dict[str, list[bytes]] = field(default_factory=dict)

    def url(self, path: str) -> str:
        return self.base_url + path

    def serve(self, path: str, body: bytes, content_type: str | None = "text/turtle", status: int = 200) -> str:
        self.routes[path] = Response(status=status, body=body, content_type=content_type)
        return self.url(path)

    def by_method(self, method: str) -> list[Recorded]:
        return [r for r in self.requests if r.method == method]


def _handler(state: GraphServer) -> type[BaseHTTPRequestHandler]:
    class Handler(BaseHTTPRequestHandler):
        def _record(self) -> bytes:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            state.requests.append(
                Recorded(
                    method=self.command,
                    path=self.path,
                    headers={k.lower(): v for k, v in self.headers.items()},
                    body=body,
                )
            )
            return body

        def _reply(self, status: int, body: bytes, content_type: str | None) -> None:
            self.send_response(status)
            if content_type is not None:
                self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def do_GET(self) -> None:  # noqa: N802
            self._record()
            route = state.routes.get(self.path)
            if route is None:
                self._reply(404, b"not found", "text/plain")
                return
            self._reply(route.status, route.body, route.content_type)

        def _write(self, replace: bool) -> None:
            body = self._record()
            if 200 <= state.write_status < 300:
                if replace:
                    state.graphs[self.path] = [body]
                else:
                    state.graphs.setdefault(self.path, []).append(body)
            self._reply(state.write_status, state.write_body, "text/plain")

        def do_PUT(self) -> None:  # noqa: N802
            self._write(replace=True)

        def do_POST(self) -> None:  # noqa: N802
            self._write(replace=False)

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            pass

    return Handler


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep localhost traffic away from any proxy configured in the environment."""
    monkeypatch.setenv("no_proxy", "*")
    monkeypatch.setenv("NO_PROXY", "*")


@pytest.fixture
def graph_server():
    state = GraphServer()
    server = ThreadingHTTPServer(("127.0.0.1", 0), _handler(state))
    host, port = server.server_address[:2]
    state.base_url = f"http://{host}:{port}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield state
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
