"""Inbound message parsing: XML first, JSON second, raw text last."""

from __future__ import annotations

import json
from typing import Any

from callbackkit.core import xml
from callbackkit.core.errors import EmptyMessageError, InvalidContentError

__all__ = ["Payload", "parse_body", "parse_message"]

Payload = dict[str, Any] | list[Any]


def parse_message(content: str) -> Payload:
    """Parse already-known message content.

    Content that starts with ``<`` must be well-formed XML.  Anything else is
    tried as JSON; when that fails too the content degrades to a one-item
    list holding the raw string instead of failing the request.

    Raises:
        InvalidContentError: If the content looks like XML but does not parse.
    """
    content = content.lstrip("\ufeff")
    if content.lstrip().startswith("<"):
        try:
            return xml.parse(content)
        except xml.ParseError as exc:
            raise InvalidContentError(
                f"Invalid message content:({exc.code}) {exc}", code=exc.code
            ) from exc

    try:
        data = json.loads(content)
    except ValueError:
        return [content]
    if isinstance(data, dict | list):
        return data
    return [content]


def parse_body(body: bytes | str) -> Payload:
    """Parse a raw request body.

    Bytes are decoded as UTF-8; a leading byte-order mark is dropped.

    Raises:
        EmptyMessageError: If the body is blank or carries no fields.
        InvalidContentError: If the body is not UTF-8, or looks like XML but
            does not parse.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidContentError(f"Invalid message content: {exc}") from exc
    content = body.strip()
    if not content:
        raise EmptyMessageError()

    payload = parse_message(content)
    if not payload:
        raise EmptyMessageError()
    return payload
