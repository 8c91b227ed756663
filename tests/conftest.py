"""Test configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from starlette.requests import Request

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


def build_request(
    body: bytes | str | None = None,
    *,
    content_type: str | None = "application/json",
    headers: dict[str, str] | None = None,
    declare_length: bool = True,
    receive: Callable[[], Awaitable[dict[str, Any]]] | None = None,
) -> Request:
    """Build a Starlette request from a raw body.

    ``body=None`` produces a request without any body headers, and
    ``declare_length=False`` sends the body without a ``Content-Length`` the
    way HTTP/2 clients may.
    """
    raw_body = body.encode() if isinstance(body, str) else body
    raw_headers: list[tuple[bytes, bytes]] = []
    if content_type is not None:
        raw_headers.append((b"content-type", content_type.encode()))
    if raw_body is not None and declare_length:
        raw_headers.append((b"content-length", str(len(raw_body)).encode()))
    for key, value in (headers or {}).items():
        raw_headers.append((key.lower().encode(), value.encode()))

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "query_string": b"",
        "headers": raw_headers,
    }

    async def _receive() -> dict[str, Any]:
        return {"type": "http.request", "body": raw_body or b"", "more_body": False}

    return Request(scope, receive or _receive)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    return build_request
