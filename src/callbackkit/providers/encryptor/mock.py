"""Mock encryptor for testing."""

from __future__ import annotations

from typing import Any

from callbackkit.providers.encryptor.base import Encryptor


class MockEncryptor(Encryptor):
    """Records calls and returns canned values.

    ``decrypt`` returns *plaintext*; ``encrypt`` returns *ciphertext*, or
    the input wrapped in a marker when no ciphertext is configured.
    """

    def __init__(self, plaintext: str = "", ciphertext: str | None = None) -> None:
        self.plaintext = plaintext
        self.ciphertext = ciphertext
        self.decrypted: list[dict[str, Any]] = []
        self.encrypted: list[str] = []

    def decrypt(self, ciphertext: str, msg_signature: str, nonce: str, timestamp: int) -> str:
        self.decrypted.append(
            {
                "ciphertext": ciphertext,
                "msg_signature": msg_signature,
                "nonce": nonce,
                "timestamp": timestamp,
            }
        )
        return self.plaintext

    def encrypt(self, plaintext: str) -> str:
        self.encrypted.append(plaintext)
        if self.ciphertext is not None:
            return self.ciphertext
        return f"encrypted:{plaintext}"
