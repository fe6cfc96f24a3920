"""http-message parser configuration.

Defines the validated options consumed by
:meth:`http_message.wire.response.Response.parse`.
"""
from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserConfig(BaseModel):
    """Options for parsing response wire text.

    All fields carry defaults, so ``ParserConfig()`` reproduces the
    reference parsing behaviour exactly.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to decode ``bytes`` input.",
    )
    max_message_size_bytes: int | None = Field(
        default=None,
        ge=0,
        description=(
            "Maximum accepted size of the message in bytes: the raw length "
            "of ``bytes`` input, the UTF-8 length of ``str`` input. "
            "``None`` disables the check."
        ),
    )
    keep_parsed_status: bool = Field(
        default=False,
        description=(
            "When True, the parsed response carries the status decoded "
            "from the status line.  When False the status is reset to "
            "200 OK for compatibility with the reference parser."
        ),
    )

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value!r}") from exc
        return value
