"""Core types, errors and configuration shared across http-message."""
from __future__ import annotations

from http_message.core.config import ParserConfig
from http_message.core.errors import (
    ErrorKind,
    HTTPMessageError,
    ParseError,
    ValidationError,
    error_from_kind,
)
from http_message.core.types import HEADER_SEPARATOR, Header, Method, Status

__all__ = [
    "HEADER_SEPARATOR",
    "ErrorKind",
    "HTTPMessageError",
    "Header",
    "Method",
    "ParseError",
    "ParserConfig",
    "Status",
    "ValidationError",
    "error_from_kind",
]
