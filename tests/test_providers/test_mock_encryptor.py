"""Tests for the encryptor contract and its mock."""

from __future__ import annotations

import pytest

from callbackkit.providers.encryptor import Encryptor, MockEncryptor


class TestEncryptorABC:
    def test_cannot_instantiate(self) -> None:
        with pytest.raises(TypeError):
            Encryptor()  # type: ignore[abstract]

    def test_name(self) -> None:
        assert MockEncryptor().name == "MockEncryptor"


class TestMockEncryptor:
    def test_decrypt_records_call(self) -> None:
        encryptor = MockEncryptor(plaintext="<xml><a>1</a></xml>")
        result = encryptor.decrypt("cipher", "sig", "nonce", 1402223334)

        assert result == "<xml><a>1</a></xml>"
        assert encryptor.decrypted == [
            {"ciphertext": "cipher", "msg_signature": "sig", "nonce": "nonce", "timestamp": 1402223334}
        ]

    def test_encrypt_canned(self) -> None:
        encryptor = MockEncryptor(ciphertext="mock-encrypted-response")
        assert encryptor.encrypt("<xml/>") == "mock-encrypted-response"
        assert encryptor.encrypted == ["<xml/>"]

    def test_encrypt_default_marker(self) -> None:
        assert MockEncryptor().encrypt("<xml/>") == "encrypted:<xml/>"
