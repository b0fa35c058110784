"""Abstract base class for safe-mode encryptors."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Encryptor(ABC):
    """Symmetric cipher used for safe-mode callbacks.

    Implementations must be safe to share between concurrent requests: the
    guard calls them from every request without locking.
    """

    @property
    def name(self) -> str:
        """Encryptor name."""
        return self.__class__.__name__

    @abstractmethod
    def decrypt(self, ciphertext: str, msg_signature: str, nonce: str, timestamp: int) -> str:
        """Decrypt an inbound ``Encrypt`` field.

        Args:
            ciphertext: Value of the ``Encrypt`` field.
            msg_signature: Signature of the encrypted envelope.
            nonce: Envelope nonce.
            timestamp: Envelope timestamp (unix seconds).

        Returns:
            The plaintext message, itself XML or JSON.

        Raises:
            DecryptError: If the envelope cannot be verified or decrypted.
        """
        ...

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """Encrypt an outbound reply.

        Args:
            plaintext: Rendered reply XML.

        Returns:
            The encrypted envelope document to send back.

        Raises:
            EncryptError: If the reply cannot be encrypted.
        """
        ...
