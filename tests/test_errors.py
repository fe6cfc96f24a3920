"""Tests for the http-message error hierarchy."""
from __future__ import annotations

import pytest

from http_message.core.errors import (
    ErrorKind,
    HTTPMessageError,
    ParseError,
    ValidationError,
    error_from_kind,
)


class TestHierarchy:
    """Category classes share the base and carry their own code and kind."""

    def test_categories_inherit_from_base(self) -> None:
        assert issubclass(ValidationError, HTTPMessageError)
        assert issubclass(ParseError, HTTPMessageError)

    def test_codes_and_kinds(self) -> None:
        assert (ValidationError.code, ValidationError.kind) == (
            "HM-E100",
            ErrorKind.INVALID_METHOD,
        )
        assert (ParseError.code, ParseError.kind) == ("HM-E200", ErrorKind.PARSER_ERROR)

    def test_default_message(self) -> None:
        exc = ParseError()
        assert exc.message == "Invalid response format"
        assert str(exc) == "Invalid response format"
        assert exc.details == {}

    def test_message_override(self) -> None:
        exc = ParseError("Invalid protocol format", details={"protocol": "HTTP"})
        assert str(exc) == "Invalid protocol format"
        assert exc.details == {"protocol": "HTTP"}

    def test_repr(self) -> None:
        assert repr(ValidationError()) == (
            "ValidationError(code='HM-E100', "
            "message='Invalid or unsupported http method')"
        )


class TestToDict:
    def test_without_details(self) -> None:
        assert ValidationError().to_dict() == {
            "error": {
                "code": "HM-E100",
                "kind": "invalid_method",
                "message": "Invalid or unsupported http method",
            }
        }

    def test_with_details(self) -> None:
        payload = ParseError("Invalid status format", details={"received": "999"}).to_dict()
        assert payload["error"]["detail"] == {"received": "999"}
        assert payload["error"]["kind"] == "parser_error"

    def test_base_has_no_kind(self) -> None:
        assert HTTPMessageError().to_dict()["error"]["kind"] is None


class TestErrorFromKind:
    def test_by_enum(self) -> None:
        exc = error_from_kind(ErrorKind.PARSER_ERROR)
        assert type(exc) is ParseError

    def test_by_string_with_message(self) -> None:
        exc = error_from_kind("invalid_method", "Unknown method: PATCH")
        assert type(exc) is ValidationError
        assert exc.message == "Unknown method: PATCH"

    def test_unknown_kind(self) -> None:
        with pytest.raises(KeyError):
            error_from_kind("teapot")
