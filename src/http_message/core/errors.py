"""http-message error hierarchy.

Every failure the message model can report is a concrete exception class
carrying a stable error code and a kind tag.

Hierarchy
---------
::

    HTTPMessageError          (HM-E000)
    +-- ValidationError       (HM-E100)  unrecognised method text
    +-- ParseError            (HM-E200)  malformed wire text

Usage
-----
Raise the concrete classes directly::

    raise ParseError("Invalid status format", details={"received": text})

Catch everything the library raises::

    try:
        response = Response.parse(raw)
    except HTTPMessageError as exc:
        ...
"""
from __future__ import annotations

import enum
from typing import Any


class ErrorKind(enum.StrEnum):
    """Kind tag shared by every error instance of a category."""

    INVALID_METHOD = "invalid_method"
    PARSER_ERROR = "parser_error"


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class HTTPMessageError(Exception):
    """Base exception for all http-message errors.

    Attributes
    ----------
    code : str
        Stable error code, e.g. ``"HM-E200"``.
    kind : ErrorKind | None
        Category tag; ``None`` only on the abstract base.
    message : str
        Human-readable description.
    details : dict[str, Any]
        Machine-readable context specific to the error instance.
    """

    code: str = "HM-E000"
    kind: ErrorKind | None = None
    message: str = "Unknown http-message error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.details: dict[str, Any] = details or {}
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Render the error as a plain dict, e.g. for a JSON error body."""
        payload: dict[str, Any] = {
            "code": self.code,
            "kind": str(self.kind) if self.kind is not None else None,
            "message": self.message,
        }
        if self.details:
            payload["detail"] = self.details
        return {"error": payload}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ===================================================================
# Categories
# ===================================================================

class ValidationError(HTTPMessageError):
    """HM-E100 -- a value outside a closed vocabulary (e.g. an unknown method)."""

    code = "HM-E100"
    kind = ErrorKind.INVALID_METHOD
    message = "Invalid or unsupported http method"


class ParseError(HTTPMessageError):
    """HM-E200 -- wire text that does not follow the message grammar."""

    code = "HM-E200"
    kind = ErrorKind.PARSER_ERROR
    message = "Invalid response format"


# ===================================================================
# Lookup
# ===================================================================

_KIND_MAP: dict[ErrorKind, type[HTTPMessageError]] = {
    ErrorKind.INVALID_METHOD: ValidationError,
    ErrorKind.PARSER_ERROR: ParseError,
}


def error_from_kind(
    kind: ErrorKind | str,
    message: str | None = None,
) -> HTTPMessageError:
    """Instantiate the exception class registered for *kind*.

    Raises
    ------
    KeyError
        If *kind* is not a recognised error kind.
    """
    try:
        cls = _KIND_MAP[ErrorKind(kind)]
    except ValueError as exc:
        raise KeyError(kind) from exc
    return cls(message) if message else cls()
