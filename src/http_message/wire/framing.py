"""Textual framing of HTTP/1.1 messages.

A message is a *head* (start line plus header lines, each terminated by
CRLF) followed by an empty line and the *body*::

    HTTP/1.1 200 OK\\r\\n
    Content-Type: text/html\\r\\n
    \\r\\n
    <body>

These helpers only cut text into sections; they never interpret it.
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CRLF: str = "\r\n"
"""Line terminator used throughout the head."""

HEAD_BODY_SEPARATOR: str = CRLF + CRLF
"""Blank line separating the head from the body."""

DEFAULT_SCHEME: str = "HTTP"
DEFAULT_VERSION: str = "1.1"


# ---------------------------------------------------------------------------
# Splitting helpers
# ---------------------------------------------------------------------------

def split_sections(text: str) -> tuple[str, str]:
    """Split *text* into ``(head, body)`` on the first blank line.

    Without a blank line the whole input is head and the body is empty.
    Later blank lines belong to the body.
    """
    head, _, body = text.partition(HEAD_BODY_SEPARATOR)
    return head, body


def split_lines(head: str) -> tuple[str, list[str]]:
    """Split a head into its start line and the list of header lines."""
    start_line, *header_lines = head.split(CRLF)
    return start_line, header_lines
