#!/usr/bin/env python3
"""http-message quickstart.

Demonstrates the core workflow of the message model:

1. Build a response with a factory and the ``with_*`` builders.
2. Serialise it to wire text.
3. Parse the wire text back, with and without keeping the status.
4. Handle a parse failure.

Run:
    python examples/quickstart.py
"""
from __future__ import annotations

import logging

from http_message import (
    Header,
    HTTPMessageError,
    Method,
    ParserConfig,
    Response,
    Status,
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # -- Step 1: Build a response ------------------------------------------
    response = (
        Response.json('{"message": "created"}')
        .with_status(Status.SEE_OTHER)
        .with_header(Header("Location", "/items/42"))
        .with_cookie("session=abc123; HttpOnly")
    )
    print(f"[1] Built response for a {Method.parse('POST')} request")

    # -- Step 2: Serialise ---------------------------------------------------
    wire = response.serialize()
    print("[2] Wire text:")
    for line in wire.split("\r\n"):
        print(f"    {line}")

    # -- Step 3: Parse it back -----------------------------------------------
    parsed = Response.parse(wire)
    print(f"[3] Parsed status (default config): {parsed.status}")
    kept = Response.parse(wire, config=ParserConfig(keep_parsed_status=True))
    print(f"    Parsed status (keep_parsed_status): {kept.status}")
    print(f"    Round trip equal: {kept == response}")

    # -- Step 4: A malformed message ---------------------------------------
    try:
        Response.parse("HTTP/1.1 418 I'M A TEAPOT\r\n\r\n")
    except HTTPMessageError as exc:
        print(f"[4] Parse failed: {exc.to_dict()}")


if __name__ == "__main__":
    main()
