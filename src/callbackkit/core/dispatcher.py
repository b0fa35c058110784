"""Message type resolution and handler dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from callbackkit.models.enums import MessageTag
from callbackkit.models.response import ResponseEnvelope

logger = logging.getLogger("callbackkit.dispatcher")

DEFAULT_MESSAGE_TYPE = "text"

MESSAGE_TYPE_MAPPING: Mapping[str, MessageTag] = MappingProxyType(
    {
        "text": MessageTag.TEXT,
        "image": MessageTag.IMAGE,
        "voice": MessageTag.VOICE,
        "video": MessageTag.VIDEO,
        "shortvideo": MessageTag.SHORT_VIDEO,
        "location": MessageTag.LOCATION,
        "link": MessageTag.LINK,
        "device_event": MessageTag.DEVICE_EVENT,
        "device_text": MessageTag.DEVICE_TEXT,
        "event": MessageTag.EVENT,
        "file": MessageTag.FILE,
        "miniprogrampage": MessageTag.MINIPROGRAM_PAGE,
        "voip": MessageTag.VOIP,
    }
)

HandlerFn = Callable[[Any], Any]
DispatchFn = Callable[[MessageTag, Any], Any]


def resolve_tag(
    msg_type: str | None,
    mapping: Mapping[str, MessageTag] = MESSAGE_TYPE_MAPPING,
) -> MessageTag:
    """Map a platform ``MsgType`` to its tag.

    A missing type counts as ``text``; a type the mapping does not know
    resolves to ``MessageTag.UNKNOWN``.
    """
    if not msg_type:
        msg_type = DEFAULT_MESSAGE_TYPE
    return mapping.get(msg_type, MessageTag.UNKNOWN)


def handle_message(
    message: Any,
    dispatch: DispatchFn,
    mapping: Mapping[str, MessageTag] = MESSAGE_TYPE_MAPPING,
) -> ResponseEnvelope:
    """Dispatch *message* once and address the reply back to its sender.

    *message* is normally a mapping of platform fields.  A payload that
    degraded to a plain list has no fields: it is dispatched as ``text``
    with empty addresses.
    """
    fields: Mapping[str, Any] = message if isinstance(message, Mapping) else {}
    tag = resolve_tag(fields.get("MsgType"), mapping)
    response = dispatch(tag, message)
    return ResponseEnvelope(
        to=str(fields.get("FromUserName", "")),
        from_=str(fields.get("ToUserName", "")),
        response=response,
    )


@dataclass
class HandlerRegistration:
    """A registered message handler.

    Attributes:
        fn: Called with the message; its return value becomes the reply.
        tags: Only run for messages with these tags (None = all)
        priority: Lower numbers run first (default: 0)
        name: Optional name for logging and removal
    """

    fn: HandlerFn
    tags: frozenset[MessageTag] | None = None
    priority: int = 0
    name: str = ""

    def matches(self, tag: MessageTag) -> bool:
        return self.tags is None or tag in self.tags


class MessageDispatcher:
    """Registry of message handlers, usable as the dispatch callable.

    Handlers run in priority order.  A handler returning ``False`` stops the
    chain; any other non-empty value becomes the reply, and a later handler
    may replace it.
    """

    def __init__(self) -> None:
        self._handlers: list[HandlerRegistration] = []

    @property
    def handlers(self) -> list[HandlerRegistration]:
        return list(self._handlers)

    def push(
        self,
        handler: HandlerFn,
        tags: MessageTag | Iterable[MessageTag] | None = None,
        *,
        name: str = "",
        priority: int = 0,
    ) -> HandlerRegistration:
        """Register *handler* for *tags* (all tags when None)."""
        if isinstance(tags, MessageTag):
            tags = [tags]
        registration = HandlerRegistration(
            fn=handler,
            tags=frozenset(tags) if tags is not None else None,
            priority=priority,
            name=name or getattr(handler, "__name__", ""),
        )
        self._handlers.append(registration)
        # sort is stable: equal priorities keep registration order
        self._handlers.sort(key=lambda h: h.priority)
        return registration

    def on(
        self, *tags: MessageTag, name: str = "", priority: int = 0
    ) -> Callable[[HandlerFn], HandlerFn]:
        """Decorator form of :meth:`push`.

        Example::

            @dispatcher.on(MessageTag.TEXT)
            def echo(message):
                return message["Content"]
        """

        def decorator(fn: HandlerFn) -> HandlerFn:
            self.push(fn, tags or None, name=name, priority=priority)
            return fn

        return decorator

    def remove(self, name: str) -> bool:
        """Remove a handler by name."""
        for i, h in enumerate(self._handlers):
            if h.name == name:
                self._handlers.pop(i)
                return True
        return False

    def dispatch(self, tag: MessageTag, message: Any) -> Any:
        matching = [h for h in self._handlers if h.matches(tag)]
        logger.debug("Dispatching %s message to %d handler(s)", tag, len(matching))

        result: Any = None
        for registration in matching:
            response = registration.fn(message)
            if response is False:
                break
            if response is True or _is_empty(response):
                continue
            result = response
        return result

    __call__ = dispatch


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str | bytes | list | tuple | dict):
        return len(value) == 0
    return False
