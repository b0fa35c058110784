"""String enums for callbackkit."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class MessageTag(StrEnum):
    """Internal tag a platform ``MsgType`` resolves to before dispatch."""

    TEXT = "text"
    IMAGE = "image"
    VOICE = "voice"
    VIDEO = "video"
    SHORT_VIDEO = "short_video"
    LOCATION = "location"
    LINK = "link"
    DEVICE_EVENT = "device_event"
    DEVICE_TEXT = "device_text"
    EVENT = "event"
    FILE = "file"
    MINIPROGRAM_PAGE = "miniprogram_page"
    VOIP = "voip"
    # Fallback for types the mapping does not know
    UNKNOWN = "unknown"


@unique
class ReplyType(StrEnum):
    """``MsgType`` values of passive replies."""

    TEXT = "text"
    IMAGE = "image"
    VOICE = "voice"
    VIDEO = "video"
    MUSIC = "music"
    NEWS = "news"
    TRANSFER = "transfer_customer_service"
    RAW = "raw"


@unique
class EncryptType(StrEnum):
    """Values of the ``encrypt_type`` request parameter."""

    RAW = "raw"
    AES = "aes"
