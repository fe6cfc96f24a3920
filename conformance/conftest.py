"""Shared fixtures for http-message conformance tests.

Provides the sample bodies and prebuilt responses reused across the
wire-format checks.
"""
from __future__ import annotations

import pytest

from http_message.core.types import Header, Status
from http_message.wire.response import Response

# ---------------------------------------------------------------------------
# Sample bodies
# ---------------------------------------------------------------------------
HTML_BODY = (
    "<html><head><title>Hello, world!</title></head>"
    "<body><h1>Hello, world!</h1></body></html>"
)
JSON_BODY = '{"greeting": "héllo"}'


# ---------------------------------------------------------------------------
# Response fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def html_response() -> Response:
    return Response.from_content(HTML_BODY, "text/html")


@pytest.fixture()
def see_other_response(html_response: Response) -> Response:
    return html_response.with_status(Status.SEE_OTHER)


@pytest.fixture()
def full_response() -> Response:
    """A response exercising every builder."""
    return (
        Response.json(JSON_BODY)
        .with_status(Status.NOT_FOUND)
        .with_header(Header("Cache-Control", "no-store"))
        .with_cookie("a=1")
        .with_cookie("b=2")
    )
