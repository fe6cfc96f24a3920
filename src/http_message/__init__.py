"""http-message -- a minimal HTTP/1.1 message model.

Typed methods, status codes, headers and a response entity that can be
built programmatically, serialised to wire text and parsed back.

Layers
------
* Core types, errors and configuration (:mod:`http_message.core`)
* Wire framing and the response codec (:mod:`http_message.wire`)
"""
from __future__ import annotations

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Core -- types, errors, config
# ---------------------------------------------------------------------------
from http_message.core.config import ParserConfig
from http_message.core.errors import (
    ErrorKind,
    HTTPMessageError,
    ParseError,
    ValidationError,
    error_from_kind,
)
from http_message.core.types import Header, Method, Status

# ---------------------------------------------------------------------------
# Wire -- framing and response codec
# ---------------------------------------------------------------------------
from http_message.wire import CRLF, Response

__all__ = [
    # Meta
    "__version__",
    # Core types
    "Header",
    "Method",
    "Status",
    # Config
    "ParserConfig",
    # Errors
    "ErrorKind",
    "HTTPMessageError",
    "ParseError",
    "ValidationError",
    "error_from_kind",
    # Wire
    "CRLF",
    "Response",
]
