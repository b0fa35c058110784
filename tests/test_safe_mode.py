"""Tests for the safe-mode envelope."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from callbackkit.core import xml
from callbackkit.core.errors import (
    DecryptError,
    EncryptError,
    EncryptorNotConfiguredError,
    InvalidContentError,
)
from callbackkit.core.parser import parse_body, parse_message
from callbackkit.core.safe_mode import extract_envelope, is_safe_mode, unwrap, wrap
from callbackkit.providers.encryptor.base import Encryptor
from callbackkit.providers.encryptor.mock import MockEncryptor
from tests.conftest import make_request, signed_params

SAFE_BODY = """<xml>
    <Encrypt>encrypted content</Encrypt>
    <MsgType>text</MsgType>
    <Nonce>mock-msg-nonce</Nonce>
    <MsgSignature>mock-msg-signature</MsgSignature>
    <TimeStamp>1402223334</TimeStamp>
</xml>"""


class _FailingEncryptor(Encryptor):
    def decrypt(self, ciphertext: str, msg_signature: str, nonce: str, timestamp: int) -> str:
        raise RuntimeError("bad padding")

    def encrypt(self, plaintext: str) -> str:
        raise RuntimeError("no key")


class _RejectingEncryptor(Encryptor):
    def decrypt(self, ciphertext: str, msg_signature: str, nonce: str, timestamp: int) -> str:
        raise DecryptError("signature mismatch")

    def encrypt(self, plaintext: str) -> str:
        raise EncryptError("encrypt refused")


class TestIsSafeMode:
    def test_aes_encrypt_type(self) -> None:
        assert is_safe_mode(make_request(**signed_params(encrypt_type="aes"))) is True

    def test_raw_encrypt_type(self) -> None:
        assert is_safe_mode(make_request(encrypt_type="raw")) is False

    def test_no_encrypt_type(self) -> None:
        assert is_safe_mode(make_request()) is False

    def test_always_flag(self) -> None:
        assert is_safe_mode(make_request(), always=True) is True


class TestExtractEnvelope:
    def test_fields_from_body(self) -> None:
        payload = xml.parse(SAFE_BODY)
        envelope = extract_envelope(payload, make_request())

        assert envelope.encrypt == "encrypted content"
        assert envelope.msg_signature == "mock-msg-signature"
        assert envelope.nonce == "mock-msg-nonce"
        assert envelope.timestamp == 1402223334

    def test_falls_back_to_query_parameters(self) -> None:
        request = make_request(
            url="http://localhost/cb?msg_signature=qs-sig&nonce=qs-nonce&timestamp=1700000000"
        )
        envelope = extract_envelope({"Encrypt": "cipher"}, request)

        assert envelope.msg_signature == "qs-sig"
        assert envelope.nonce == "qs-nonce"
        assert envelope.timestamp == 1700000000

    def test_bad_timestamp(self) -> None:
        with pytest.raises(InvalidContentError):
            extract_envelope({"Encrypt": "x", "TimeStamp": "yesterday"}, make_request())


class TestUnwrap:
    def test_calls_decrypt_with_envelope(self) -> None:
        encryptor = MockEncryptor(plaintext=xml.build({"foo": "bar"}))
        payload = parse_body(SAFE_BODY)

        plaintext = unwrap(payload, make_request(encrypt_type="aes"), encryptor)  # type: ignore[arg-type]

        assert parse_message(plaintext) == {"foo": "bar"}
        assert encryptor.decrypted == [
            {
                "ciphertext": "encrypted content",
                "msg_signature": "mock-msg-signature",
                "nonce": "mock-msg-nonce",
                "timestamp": 1402223334,
            }
        ]

    def test_unwrap_then_parse_reproduces_fields(self) -> None:
        fields: dict[str, Any] = {
            "ToUserName": "gh_123",
            "FromUserName": "user-1",
            "CreateTime": "1402223334",
            "MsgType": "text",
            "Content": "hi <there> & ]]> bye",
        }
        encryptor = MockEncryptor(plaintext=xml.build(fields))
        plaintext = unwrap(xml.parse(SAFE_BODY), make_request(), encryptor)
        assert parse_message(plaintext) == fields

    def test_without_encryptor(self) -> None:
        with pytest.raises(EncryptorNotConfiguredError):
            unwrap(xml.parse(SAFE_BODY), make_request(), None)

    def test_unexpected_failure_wrapped(self) -> None:
        with pytest.raises(DecryptError, match="bad padding") as exc_info:
            unwrap(xml.parse(SAFE_BODY), make_request(), _FailingEncryptor())
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_decrypt_error_propagates(self) -> None:
        with pytest.raises(DecryptError, match="signature mismatch"):
            unwrap(xml.parse(SAFE_BODY), make_request(), _RejectingEncryptor())

    def test_logs_encryptor(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="callbackkit.safe_mode"):
            unwrap(xml.parse(SAFE_BODY), make_request(), MockEncryptor(plaintext="<xml/>"))
        assert "Decrypting safe-mode message: encryptor=MockEncryptor" in caplog.messages


class TestWrap:
    def test_returns_ciphertext(self) -> None:
        encryptor = MockEncryptor(ciphertext="mock-encrypted-response")
        assert wrap("<xml/>", encryptor) == "mock-encrypted-response"
        assert encryptor.encrypted == ["<xml/>"]

    def test_without_encryptor(self) -> None:
        with pytest.raises(EncryptorNotConfiguredError):
            wrap("<xml/>", None)

    def test_unexpected_failure_wrapped(self) -> None:
        with pytest.raises(EncryptError, match="no key"):
            wrap("<xml/>", _FailingEncryptor())

    def test_encrypt_error_propagates(self) -> None:
        with pytest.raises(EncryptError, match="encrypt refused"):
            wrap("<xml/>", _RejectingEncryptor())

    def test_logs_encryptor(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="callbackkit.safe_mode"):
            wrap("<xml/>", MockEncryptor())
        assert "Encrypting safe-mode reply: encryptor=MockEncryptor" in caplog.messages
