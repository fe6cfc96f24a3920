"""HTTP response entity and its wire codec.

This module provides:

* **Response** -- an immutable response value with factory constructors
  (``empty``, ``from_body``, ``from_content``, ``html``, ``json``) and
  builder methods (``with_status``, ``with_header``, ``with_cookie``)
  that each return a new value.
* **Serialisation** -- :meth:`Response.serialize` renders the exact
  wire text; :meth:`Response.to_bytes` encodes it for a transport.
* **Parsing** -- :meth:`Response.parse` reads wire text back into a
  :class:`Response`.  The parser is forgiving: malformed header lines
  are dropped rather than failing the whole message.

All helpers are synchronous and side-effect-free.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from http_message.core.config import ParserConfig
from http_message.core.errors import ParseError
from http_message.core.types import Header, Status
from http_message.wire.framing import (
    CRLF,
    DEFAULT_SCHEME,
    DEFAULT_VERSION,
    split_lines,
    split_sections,
)

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE: str = "text/html"
JSON_CONTENT_TYPE: str = "application/json"

_DEFAULT_CONFIG = ParserConfig()


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response.

    Instances are immutable.  Build one with a factory and refine it
    with the ``with_*`` methods::

        response = (
            Response.html("<h1>Hello</h1>")
            .with_status(Status.NOT_FOUND)
            .with_cookie("session=abc")
        )

    Attributes
    ----------
    scheme:
        Protocol family on the status line (``"HTTP"``).
    version:
        Protocol version on the status line (``"1.1"``).
    status:
        Response status.
    headers:
        Header fields in the order they were added.  Duplicate keys are
        kept and serialised as separate lines.
    content:
        Body text.
    """

    scheme: str = DEFAULT_SCHEME
    version: str = DEFAULT_VERSION
    status: Status = Status.OK
    headers: tuple[Header, ...] = ()
    content: str = ""

    # -- Factories -------------------------------------------------------

    @classmethod
    def empty(cls) -> Response:
        """Create a ``200 OK`` response with no headers and no body."""
        return cls()

    @classmethod
    def from_body(cls, content: str) -> Response:
        """Create a response with *content* as body.

        Neither ``Content-Type`` nor ``Content-Length`` is set.
        """
        return cls(content=content)

    @classmethod
    def from_content(cls, content: str, content_type: str) -> Response:
        """Create a response with a body and its describing headers.

        Appends ``Content-Type: <content_type>`` followed by
        ``Content-Length`` set to the UTF-8 byte length of *content*.
        The length is not recomputed if the response is changed later.
        """
        content_length = len(content.encode("utf-8"))
        return (
            cls.from_body(content)
            .with_header(Header("Content-Type", content_type))
            .with_header(Header("Content-Length", str(content_length)))
        )

    @classmethod
    def html(cls, content: str) -> Response:
        """Create a ``text/html`` response (see :meth:`from_content`)."""
        return cls.from_content(content, HTML_CONTENT_TYPE)

    @classmethod
    def json(cls, content: str) -> Response:
        """Create an ``application/json`` response (see :meth:`from_content`).

        *content* is sent as given; it is not encoded or validated as JSON.
        """
        return cls.from_content(content, JSON_CONTENT_TYPE)

    # -- Builders --------------------------------------------------------

    def with_status(self, status: Status) -> Response:
        """Return a copy with *status* replacing the current status."""
        return replace(self, status=status)

    def with_header(self, header: Header) -> Response:
        """Return a copy with *header* appended after the existing headers.

        Existing headers with the same key are left in place.
        """
        return replace(self, headers=(*self.headers, header))

    def with_cookie(self, value: str) -> Response:
        """Return a copy with a ``Set-Cookie: <value>`` header appended."""
        return self.with_header(Header("Set-Cookie", value))

    # -- Serialisation ---------------------------------------------------

    @property
    def status_line(self) -> str:
        return f"{self.scheme}/{self.version} {self.status.to_wire_text()}"

    def serialize(self) -> str:
        """Render the response as HTTP/1.1 wire text.

        The status line and every header line end in CRLF, an empty line
        separates the head from the body, and nothing follows the body.
        """
        headers = "".join(f"{header.to_text()}{CRLF}" for header in self.headers)
        return f"{self.status_line}{CRLF}{headers}{CRLF}{self.content}"

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        """Return :meth:`serialize` encoded for writing to a transport."""
        return self.serialize().encode(encoding)

    def __str__(self) -> str:
        return self.serialize()

    # -- Parsing ---------------------------------------------------------

    @classmethod
    def parse(
        cls,
        raw: str | bytes,
        *,
        config: ParserConfig | None = None,
    ) -> Response:
        """Parse wire text into a :class:`Response`.

        Designed to read back what :meth:`serialize` produces; it is not
        a conforming general-purpose HTTP parser.

        Parameters
        ----------
        raw:
            The message as text, or as bytes in ``config.encoding``.
        config:
            Parser options.  Defaults to :class:`ParserConfig` defaults.

        Notes
        -----
        Unless ``config.keep_parsed_status`` is set, the returned
        response always has status ``200 OK``: the status code on the
        wire is validated but not kept.

        Raises
        ------
        ParseError
            If the input cannot be decoded, exceeds the size limit, or
            has a malformed start line, protocol token or status code.
        """
        config = config or _DEFAULT_CONFIG
        text = _decode(raw, config)

        head, body = split_sections(text)
        start_line, header_lines = split_lines(head)

        protocol, *tokens = start_line.split(" ")
        scheme, version = _parse_protocol(protocol)

        # The reason phrase after the code is not checked.
        if not tokens:
            raise ParseError(
                "Invalid response format",
                details={"start_line": start_line},
            )
        status_token = tokens[0]
        try:
            status = Status.parse(status_token)
        except ParseError as exc:
            raise ParseError(
                "Invalid response format",
                details={"start_line": start_line, "status": status_token},
            ) from exc

        if not config.keep_parsed_status and status is not Status.OK:
            logger.debug("Parsed status %s reset to %s", status, Status.OK)
            status = Status.OK

        return cls(
            scheme=scheme,
            version=version,
            status=status,
            headers=tuple(_parse_headers(header_lines)),
            content=body,
        )


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

def _decode(raw: str | bytes, config: ParserConfig) -> str:
    """Return *raw* as text, enforcing the configured size limit.

    Only ``bytes`` input is decoded with ``config.encoding``; ``str``
    input is measured by its UTF-8 length.
    """
    limit = config.max_message_size_bytes
    if limit is not None:
        size = len(raw) if isinstance(raw, bytes) else len(raw.encode("utf-8", "surrogatepass"))
        if size > limit:
            raise ParseError(
                f"Message size {size} exceeds limit of {limit} bytes",
                details={"size": size, "limit": limit},
            )

    if not isinstance(raw, bytes):
        return raw
    try:
        return raw.decode(config.encoding)
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"Message is not valid {config.encoding}",
            details={"encoding": config.encoding},
        ) from exc


def _parse_protocol(protocol: str) -> tuple[str, str]:
    """Split ``"HTTP/1.1"`` into ``("HTTP", "1.1")``."""
    parts = protocol.split("/")
    if len(parts) < 2:
        raise ParseError(
            "Invalid protocol format",
            details={"protocol": protocol},
        )
    return parts[0], parts[1]


def _parse_headers(lines: Iterable[str]) -> Iterator[Header]:
    """Yield a :class:`Header` for each well-formed line, skipping the rest."""
    for line in lines:
        try:
            yield Header.parse(line)
        except ParseError:
            logger.debug("Skipping malformed header line: %r", line)
