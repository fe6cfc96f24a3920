"""http-message wire subpackage -- message framing, serialisation and parsing.

* **Framing** -- line terminators and head/body splitting
  (:mod:`~http_message.wire.framing`).
* **Response** -- the response entity and its codec
  (:mod:`~http_message.wire.response`).
"""
from __future__ import annotations

from http_message.wire.framing import (
    CRLF,
    DEFAULT_SCHEME,
    DEFAULT_VERSION,
    HEAD_BODY_SEPARATOR,
    split_lines,
    split_sections,
)
from http_message.wire.response import (
    HTML_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    Response,
)

__all__ = [
    # Framing
    "CRLF",
    "DEFAULT_SCHEME",
    "DEFAULT_VERSION",
    "HEAD_BODY_SEPARATOR",
    "split_lines",
    "split_sections",
    # Response
    "HTML_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "Response",
]
