"""Passive reply messages and the renderable capability."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from callbackkit.core import xml
from callbackkit.models.enums import ReplyType


@runtime_checkable
class Renderable(Protocol):
    """Anything that can be rendered as a reply document."""

    message_type: ClassVar[ReplyType]

    def to_xml(self, prepends: Mapping[str, Any] | None = None) -> str: ...


class ReplyMessage(BaseModel):
    """Base class for reply variants.

    Subclasses set ``message_type`` and return their own fields from
    ``to_xml_fields``; the envelope fields (``ToUserName``, ``FromUserName``,
    ``CreateTime``) come in through *prepends*.
    """

    message_type: ClassVar[ReplyType]

    def to_xml_fields(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_xml(self, prepends: Mapping[str, Any] | None = None) -> str:
        data: dict[str, Any] = dict(prepends or {})
        data.setdefault("MsgType", self.message_type.value)
        data.update(self.to_xml_fields())
        return xml.build(data)


class Text(ReplyMessage):
    """Plain text reply."""

    message_type: ClassVar[ReplyType] = ReplyType.TEXT

    content: str

    def to_xml_fields(self) -> dict[str, Any]:
        return {"Content": self.content}


class Image(ReplyMessage):
    message_type: ClassVar[ReplyType] = ReplyType.IMAGE

    media_id: str

    def to_xml_fields(self) -> dict[str, Any]:
        return {"Image": {"MediaId": self.media_id}}


class Voice(ReplyMessage):
    message_type: ClassVar[ReplyType] = ReplyType.VOICE

    media_id: str

    def to_xml_fields(self) -> dict[str, Any]:
        return {"Voice": {"MediaId": self.media_id}}


class Video(ReplyMessage):
    message_type: ClassVar[ReplyType] = ReplyType.VIDEO

    media_id: str
    title: str | None = None
    description: str | None = None
    thumb_media_id: str | None = None

    def to_xml_fields(self) -> dict[str, Any]:
        fields = {
            "MediaId": self.media_id,
            "Title": self.title,
            "Description": self.description,
            "ThumbMediaId": self.thumb_media_id,
        }
        return {"Video": {k: v for k, v in fields.items() if v is not None}}


class Music(ReplyMessage):
    message_type: ClassVar[ReplyType] = ReplyType.MUSIC

    title: str | None = None
    description: str | None = None
    url: str | None = None
    hq_url: str | None = None
    thumb_media_id: str

    def to_xml_fields(self) -> dict[str, Any]:
        fields = {
            "Title": self.title,
            "Description": self.description,
            "MusicUrl": self.url,
            "HQMusicUrl": self.hq_url,
            "ThumbMediaId": self.thumb_media_id,
        }
        return {"Music": {k: v for k, v in fields.items() if v is not None}}


class NewsItem(BaseModel):
    """One article of a :class:`News` reply."""

    title: str
    description: str = ""
    url: str = ""
    image: str = ""

    def to_xml_fields(self) -> dict[str, Any]:
        return {
            "Title": self.title,
            "Description": self.description,
            "PicUrl": self.image,
            "Url": self.url,
        }


class News(ReplyMessage):
    """Article list reply, at most eight articles."""

    message_type: ClassVar[ReplyType] = ReplyType.NEWS

    items: list[NewsItem] = Field(min_length=1, max_length=8)

    def to_xml_fields(self) -> dict[str, Any]:
        return {
            "ArticleCount": len(self.items),
            "Articles": [item.to_xml_fields() for item in self.items],
        }


class Transfer(ReplyMessage):
    """Hand the conversation over to customer service."""

    message_type: ClassVar[ReplyType] = ReplyType.TRANSFER

    account: str | None = None

    def to_xml_fields(self) -> dict[str, Any]:
        if self.account:
            return {"TransInfo": {"KfAccount": self.account}}
        return {}


class Raw(ReplyMessage):
    """Pre-rendered content, sent back byte for byte."""

    message_type: ClassVar[ReplyType] = ReplyType.RAW

    content: str | bytes

    def to_xml(self, prepends: Mapping[str, Any] | None = None) -> str:
        # only used when embedded among other replies; a lone Raw is sent as-is
        if isinstance(self.content, bytes):
            return self.content.decode()
        return self.content
