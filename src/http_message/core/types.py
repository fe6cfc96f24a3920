"""http-message shared value types.

This module defines the leaf types of the message model.  All public
symbols are re-exported from ``http_message.core``.

Key design decisions:
* ``Status`` keeps its numeric code and reason phrase together in the
  enum member value, so the code/reason mapping is declared exactly once.
* ``Method`` is a *string* enum so members compare equal to their wire
  text.
* ``Header`` is a frozen dataclass: a response owns its headers and
  nothing may change them after construction.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass

from http_message.core.errors import ParseError, ValidationError

HEADER_SEPARATOR: str = ": "
"""Separator between a header key and its value on the wire."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Method(enum.StrEnum):
    """Supported HTTP request methods.

    Matching is exact and case-sensitive: ``"get"`` is not a method.
    """

    HEAD = "HEAD"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, text: str) -> Method:
        """Return the method named by *text*.

        Raises
        ------
        ValidationError
            If *text* is not one of the supported method names.
        """
        try:
            return cls(text)
        except ValueError as exc:
            raise ValidationError(
                "Invalid or unsupported http method",
                details={"received": text, "supported": [m.value for m in cls]},
            ) from exc


class Status(enum.Enum):
    """Supported HTTP status codes.

    Each member's value is the ``(code, reason)`` pair it stands for::

        >>> Status.NOT_FOUND.code
        404
        >>> str(Status.NOT_FOUND)
        '404 NOT FOUND'
    """

    SWITCHING_PROTOCOLS = (101, "SWITCHING PROTOCOLS")
    OK = (200, "OK")
    SEE_OTHER = (303, "SEE OTHER")
    BAD_REQUEST = (400, "BAD REQUEST")
    UNAUTHORIZED = (401, "UNAUTHORIZED")
    FORBIDDEN = (403, "FORBIDDEN")
    NOT_FOUND = (404, "NOT FOUND")
    NOT_ALLOWED = (405, "NOT ALLOWED")
    INTERNAL_SERVER_ERROR = (500, "INTERNAL SERVER ERROR")

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message

    def to_wire_text(self) -> str:
        """Return the status as it appears on a status line (``"404 NOT FOUND"``)."""
        return f"{self.code} {self.message}"

    def __str__(self) -> str:
        return self.to_wire_text()

    @classmethod
    def parse(cls, text: str) -> Status:
        """Return the status whose three-digit code is exactly *text*.

        No trimming or numeric coercion is applied: ``" 200"`` and
        ``"0200"`` are both rejected.

        Raises
        ------
        ParseError
            If *text* is not the code of a supported status.
        """
        try:
            return _STATUS_BY_TEXT[text]
        except (KeyError, TypeError) as exc:
            raise ParseError(
                "Invalid status format",
                details={"received": text},
            ) from exc

    @classmethod
    def from_code(cls, code: int) -> Status:
        """Return the status for the numeric *code*.

        Raises
        ------
        ParseError
            If *code* is not a supported status code.
        """
        try:
            return _STATUS_BY_CODE[code]
        except (KeyError, TypeError) as exc:
            raise ParseError(
                f"Unsupported status code: {code!r}",
                details={"received": code},
            ) from exc


_STATUS_BY_CODE: dict[int, Status] = {status.code: status for status in Status}
_STATUS_BY_TEXT: dict[str, Status] = {str(status.code): status for status in Status}


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Header:
    """A single header field.

    Attributes
    ----------
    key:
        Header name, kept exactly as given (no case folding).
    value:
        Header value, rendered verbatim (no escaping).
    """

    key: str
    value: str

    def to_text(self) -> str:
        """Render the header as ``"key: value"``."""
        return f"{self.key}{HEADER_SEPARATOR}{self.value}"

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def parse(cls, line: str) -> Header:
        """Build a header from one ``"key: value"`` line.

        The line is split on the first ``": "`` only, so the value may
        itself contain the separator.

        Raises
        ------
        ParseError
            If the line does not contain ``": "``.
        """
        key, sep, value = line.partition(HEADER_SEPARATOR)
        if not sep:
            raise ParseError(
                "Invalid header format",
                details={"line": line},
            )
        return cls(key, value)
