"""Parsed inbound message."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any


class Message(Mapping[str, Any]):
    """Read-only, ordered view of the fields of one inbound message.

    Keys are the platform field names (``ToUserName``, ``FromUserName``,
    ``MsgType``, ``CreateTime``, ``Content`` ...).  Compares equal to any
    mapping holding the same items.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self._fields = MappingProxyType(dict(fields or {}))

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Message({dict(self._fields)!r})"

    @property
    def msg_type(self) -> str | None:
        return self._fields.get("MsgType")

    @property
    def from_user(self) -> str:
        return str(self._fields.get("FromUserName", ""))

    @property
    def to_user(self) -> str:
        return str(self._fields.get("ToUserName", ""))

    @property
    def create_time(self) -> int | None:
        value = self._fields.get("CreateTime")
        if value in (None, ""):
            return None
        return int(value)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._fields)
