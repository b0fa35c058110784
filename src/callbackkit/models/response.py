"""Dispatch envelope and transport response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ResponseEnvelope(BaseModel):
    """Routing result of one dispatched message.

    ``to`` and ``from_`` are already swapped: the reply goes back to the
    sender of the inbound message.
    """

    model_config = {"arbitrary_types_allowed": True}

    to: str
    from_: str
    response: Any = None


class GuardResponse(BaseModel):
    """What the guard hands back to the transport layer."""

    status_code: int = 200
    content: str | bytes
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def body(self) -> bytes:
        if isinstance(self.content, bytes):
            return self.content
        return self.content.encode()
