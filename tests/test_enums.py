"""Tests for string enums."""

from __future__ import annotations

import pytest

from callbackkit.models.enums import EncryptType, MessageTag, ReplyType


class TestMessageTag:
    def test_members(self) -> None:
        assert MessageTag.TEXT == "text"
        assert MessageTag.SHORT_VIDEO == "short_video"
        assert MessageTag.UNKNOWN == "unknown"

    def test_count(self) -> None:
        assert len(MessageTag) == 14

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            MessageTag("invalid")


class TestReplyType:
    def test_values(self) -> None:
        assert ReplyType.TRANSFER == "transfer_customer_service"
        assert ReplyType.NEWS == "news"


class TestEncryptType:
    def test_values(self) -> None:
        assert EncryptType.AES == "aes"
        assert EncryptType.RAW == "raw"
