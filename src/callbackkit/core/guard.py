"""Callback guard: validate, decrypt, parse, dispatch and reply."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from callbackkit.core.config import GuardConfig
from callbackkit.core.dispatcher import (
    HandlerFn,
    HandlerRegistration,
    MessageDispatcher,
    handle_message,
)
from callbackkit.core.errors import EmptyMessageError
from callbackkit.core.parser import Payload, parse_body, parse_message
from callbackkit.core.response import SUCCESS_EMPTY_RESPONSE, build_response
from callbackkit.core.safe_mode import is_safe_mode, unwrap
from callbackkit.core.signature import validate_signature
from callbackkit.models.enums import MessageTag
from callbackkit.models.message import Message
from callbackkit.models.reply import Raw
from callbackkit.models.request import IncomingRequest
from callbackkit.models.response import GuardResponse, ResponseEnvelope
from callbackkit.providers.encryptor.base import Encryptor

logger = logging.getLogger("callbackkit.guard")


class Guard:
    """Entry point for inbound platform callbacks.

    One guard serves any number of requests; it only holds the
    configuration, the encryptor and the handler registry.  Each call to
    :meth:`serve` processes one request start to finish::

        guard = Guard(GuardConfig(token="my-token"))

        @guard.on(MessageTag.TEXT)
        def echo(message):
            return message["Content"]

        response = guard.serve(request)
    """

    SUCCESS_EMPTY_RESPONSE = SUCCESS_EMPTY_RESPONSE

    def __init__(
        self,
        config: GuardConfig | None = None,
        *,
        encryptor: Encryptor | None = None,
        dispatcher: MessageDispatcher | None = None,
    ) -> None:
        self._config = config or GuardConfig()
        self._encryptor = encryptor
        self._dispatcher = dispatcher or MessageDispatcher()

    @property
    def config(self) -> GuardConfig:
        return self._config

    @property
    def encryptor(self) -> Encryptor | None:
        return self._encryptor

    @property
    def dispatcher(self) -> MessageDispatcher:
        return self._dispatcher

    # -- handler registration ------------------------------------------------

    def push(
        self,
        handler: HandlerFn,
        tags: MessageTag | Iterable[MessageTag] | None = None,
        *,
        name: str = "",
        priority: int = 0,
    ) -> HandlerRegistration:
        return self._dispatcher.push(handler, tags, name=name, priority=priority)

    def on(
        self, *tags: MessageTag, name: str = "", priority: int = 0
    ) -> Callable[[HandlerFn], HandlerFn]:
        return self._dispatcher.on(*tags, name=name, priority=priority)

    # -- request processing --------------------------------------------------

    def serve(self, request: IncomingRequest) -> GuardResponse:
        """Process one callback and return the response to send."""
        logger.debug(
            "Request received: method=%s uri=%s content-type=%s content=%s",
            request.method,
            request.uri,
            request.content_type,
            request.content,
        )
        return self.validate(request).resolve(request)

    def validate(self, request: IncomingRequest) -> Guard:
        """Check the request signature.

        Raises:
            InvalidSignatureError: If the signature does not match.
        """
        validate_signature(
            request,
            self._config.token_value,
            enforce=self._config.enforce_signature,
        )
        return self

    def resolve(self, request: IncomingRequest) -> GuardResponse:
        envelope = self.handle_request(request)
        if self.should_return_raw_response(request):
            content = _raw_content(envelope.response)
        else:
            content = self.build_response(envelope.to, envelope.from_, envelope.response, request)

        logger.debug("Server response created: content=%s", content)
        return GuardResponse(status_code=200, content=content)

    def handle_request(self, request: IncomingRequest) -> ResponseEnvelope:
        message = self.get_message(request)
        return handle_message(message, self.dispatch)

    def dispatch(self, tag: MessageTag, message: Any) -> Any:
        return self._dispatcher.dispatch(tag, message)

    def get_message(self, request: IncomingRequest) -> Message | list[Any]:
        """Parse the request body, decrypting it first in safe mode.

        Raises:
            EmptyMessageError: If no message fields were received.
            InvalidContentError: If the body is malformed XML.
            DecryptError: If the encryptor rejects the envelope.
        """
        payload = parse_body(request.body)

        if (
            self.is_safe_mode(request)
            and isinstance(payload, Mapping)
            and payload.get("Encrypt")
        ):
            payload = self.parse_message(unwrap(payload, request, self._encryptor))
            if not payload:
                raise EmptyMessageError()

        if isinstance(payload, Mapping):
            return Message(payload)
        return payload

    def parse_message(self, content: str) -> Payload:
        return parse_message(content)

    def is_safe_mode(self, request: IncomingRequest) -> bool:
        return is_safe_mode(request, always=self._config.always_safe_mode)

    def should_return_raw_response(self, request: IncomingRequest) -> bool:
        return self._config.raw_response

    def build_response(
        self,
        to: str,
        from_: str,
        value: Any,
        request: IncomingRequest | None = None,
    ) -> str | bytes:
        safe_mode = (
            self.is_safe_mode(request) if request is not None else self._config.always_safe_mode
        )
        return build_response(
            to,
            from_,
            value,
            encryptor=self._encryptor,
            safe_mode=safe_mode,
        )


def _raw_content(value: Any) -> str | bytes:
    if value is None:
        return ""
    if isinstance(value, Raw):
        return value.content
    if isinstance(value, bytes):
        return value
    return str(value)
