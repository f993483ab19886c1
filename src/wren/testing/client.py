"""Async test client for wren applications.

Uses the same Request and Response types as production.
No wrapper translation layer.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from wren.app import App
from wren.http.response import Response

_FORM_CT = "application/x-www-form-urlencoded"


class TestClient:
    """Async test client for wren applications.

    Returns the same ``Response`` type used in production. Sends requests
    through the ASGI interface directly — no HTTP involved.

    Usage::

        async with TestClient(app) as client:
            response = await client.get("/")
            assert response.status == 200
    """

    __test__ = False  # Tell pytest this is not a test class
    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        self.app._ensure_frozen()
        await self.app.startup()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.app.shutdown()

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        form: dict[str, Any] | None = None,
    ) -> Response:
        """Send a POST request. ``form`` is URL-encoded into the body."""
        return await self.request("POST", path, headers=headers, body=body, form=form)

    async def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        form: dict[str, Any] | None = None,
    ) -> Response:
        """Send a PUT request. ``form`` is URL-encoded into the body."""
        return await self.request("PUT", path, headers=headers, body=body, form=form)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a DELETE request."""
        return await self.request("DELETE", path, headers=headers)

    async def fragment(
        self,
        path: str,
        *,
        method: str = "GET",
        target: str | None = None,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        form: dict[str, Any] | None = None,
    ) -> Response:
        """Send an htmx fragment request (sets the ``HX-Request`` header)."""
        fragment_headers: dict[str, str] = {"HX-Request": "true"}
        if target is not None:
            fragment_headers["HX-Target"] = target
        if headers:
            fragment_headers.update(headers)
        return await self.request(method, path, headers=fragment_headers, body=body, form=form)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        form: dict[str, Any] | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")

        merged = dict(headers or {})
        request_body = body or b""
        if form is not None:
            request_body = urlencode(form).encode("utf-8")
            if not any(name.lower() == "content-type" for name in merged):
                merged["Content-Type"] = _FORM_CT

        raw_headers: list[tuple[bytes, bytes]] = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in merged.items()
        ]

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path_part,
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            return {"type": "http.disconnect"}

        response_status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        response_body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal response_status, response_headers
            if message["type"] == "http.response.start":
                response_status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                response_body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        content_type = "text/html; charset=utf-8"
        extra_headers: list[tuple[str, str]] = []
        for name_b, value_b in response_headers:
            name_str = name_b.decode("latin-1")
            value_str = value_b.decode("latin-1")
            if name_str == "content-type":
                content_type = value_str
            elif name_str != "content-length":
                extra_headers.append((name_str, value_str))

        return Response(
            body=b"".join(response_body_parts),
            status=response_status,
            content_type=content_type,
            headers=tuple(extra_headers),
        )
