"""Normalize handler return values into reply documents."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from callbackkit.core.errors import InvalidArgumentError
from callbackkit.core.safe_mode import wrap
from callbackkit.models.reply import News, NewsItem, Raw, Renderable, Text
from callbackkit.providers.encryptor.base import Encryptor

logger = logging.getLogger("callbackkit.response")

SUCCESS_EMPTY_RESPONSE = "success"


def is_message(value: Any) -> bool:
    """Return True if *value* is a reply or a non-empty sequence of replies.

    A single element that is not renderable disqualifies the whole sequence.
    """
    if isinstance(value, list | tuple):
        return bool(value) and all(isinstance(item, Renderable) for item in value)
    return isinstance(value, Renderable)


def build_response(
    to: str,
    from_: str,
    value: Any,
    *,
    encryptor: Encryptor | None = None,
    safe_mode: bool = False,
) -> str | bytes:
    """Turn a handler's return value into the response body.

    Empty values, ``bytes`` and :class:`Raw` replies are returned as-is and
    never encrypted.  Strings and numbers become a :class:`Text` reply.  In safe
    mode the rendered XML is passed through the encryptor once.

    Raises:
        InvalidArgumentError: If *value* cannot be turned into a reply.
    """
    if _is_empty(value) or value == SUCCESS_EMPTY_RESPONSE:
        return SUCCESS_EMPTY_RESPONSE

    if isinstance(value, bytes):
        return value
    if isinstance(value, Raw):
        return value.content

    if isinstance(value, str) or (isinstance(value, int | float) and not isinstance(value, bool)):
        value = Text(content=str(value))

    if isinstance(value, list | tuple) and all(isinstance(item, NewsItem) for item in value):
        value = News(items=list(value))

    if not is_message(value):
        raise InvalidArgumentError(f'Invalid Messages type "{_type_name(value)}".')

    replies = value if isinstance(value, list | tuple) else [value]
    created = int(time.time())
    content = "".join(
        reply.to_xml(
            {
                "ToUserName": to,
                "FromUserName": from_,
                "CreateTime": created,
                "MsgType": str(reply.message_type),
            }
        )
        for reply in replies
    )

    if safe_mode:
        logger.debug("Messages safe mode is enabled.")
        content = wrap(content, encryptor)

    return content


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, int | float) and value == 0:
        return True
    if isinstance(value, str | bytes | list | tuple | Mapping):
        return len(value) == 0
    return False


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, list | tuple | Mapping):
        return "array"
    return "object"
