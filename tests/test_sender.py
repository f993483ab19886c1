"""Tests for wren.server.sender response emission rules."""

import pytest

from wren.http.response import Response
from wren.server.sender import send_response


async def _send(response: Response) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send)
    return messages


class TestSendResponse:
    async def test_start_then_body(self) -> None:
        messages = await _send(Response("hi").with_status(201).with_header("X-A", "1"))
        assert [m["type"] for m in messages] == ["http.response.start", "http.response.body"]
        assert messages[0]["status"] == 201
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/html; charset=utf-8"
        assert headers[b"x-a"] == b"1"
        assert headers[b"content-length"] == b"2"
        assert messages[1]["body"] == b"hi"

    async def test_content_length_counts_bytes(self) -> None:
        messages = await _send(Response("é"))
        assert dict(messages[0]["headers"])[b"content-length"] == b"2"

    @pytest.mark.parametrize("status", [101, 204, 304])
    async def test_no_body_statuses(self, status: int) -> None:
        messages = await _send(Response("unexpected-body").with_status(status))
        assert dict(messages[0]["headers"])[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    async def test_empty_200(self) -> None:
        messages = await _send(Response(""))
        assert messages[1]["body"] == b""
        assert dict(messages[0]["headers"])[b"content-length"] == b"0"
