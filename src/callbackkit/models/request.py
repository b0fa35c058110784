"""Inbound request model."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlsplit

from pydantic import BaseModel, Field


class IncomingRequest(BaseModel):
    """A webhook callback as received by the transport layer.

    The guard only reads from it.  Parameters are looked up in the query
    string first, then in the form body, the same order the platform SDKs
    use.
    """

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    method: str = "POST"
    uri: str = "/"
    content_type: str = "application/xml"
    body: bytes = b""
    query: dict[str, str] = Field(default_factory=dict)
    form: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        url: str,
        method: str = "POST",
        form: dict[str, Any] | None = None,
        body: bytes | str = b"",
        content_type: str = "application/xml",
    ) -> IncomingRequest:
        """Build a request from a full URL, splitting off its query string."""
        parts = urlsplit(url)
        query = dict(parse_qsl(parts.query, keep_blank_values=True))
        if isinstance(body, str):
            body = body.encode()
        return cls(
            method=method.upper(),
            uri=url,
            content_type=content_type,
            body=body,
            query=query,
            form={k: str(v) for k, v in (form or {}).items()},
        )

    def get(self, name: str, default: str | None = None) -> str | None:
        if name in self.query:
            return self.query[name]
        return self.form.get(name, default)

    @property
    def content(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def timestamp(self) -> str | None:
        return self.get("timestamp")

    @property
    def nonce(self) -> str | None:
        return self.get("nonce")

    @property
    def signature(self) -> str | None:
        return self.get("signature")

    @property
    def msg_signature(self) -> str | None:
        return self.get("msg_signature")

    @property
    def encrypt_type(self) -> str | None:
        return self.get("encrypt_type")
