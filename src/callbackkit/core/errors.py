"""Exceptions raised while guarding an inbound callback."""

from __future__ import annotations

__all__ = [
    "BadRequestError",
    "CallbackKitError",
    "DecryptError",
    "EmptyMessageError",
    "EncryptError",
    "EncryptorNotConfiguredError",
    "InvalidArgumentError",
    "InvalidContentError",
    "InvalidSignatureError",
]


class CallbackKitError(Exception):
    """Base exception for all callbackkit errors."""


class BadRequestError(CallbackKitError):
    """The inbound request cannot be processed.

    Attributes:
        status_code: HTTP status the transport layer should answer with.
    """

    status_code: int = 400

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class InvalidSignatureError(BadRequestError):
    """Request signature does not match the shared token."""

    def __init__(self, message: str = "Invalid request signature.") -> None:
        super().__init__(message)


class EmptyMessageError(BadRequestError):
    """Request body carries no message fields."""

    def __init__(self, message: str = "No message received.") -> None:
        super().__init__(message)


class InvalidContentError(BadRequestError):
    """Message content is not well-formed.

    Attributes:
        code: Error code reported by the underlying parser.
    """

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class InvalidArgumentError(CallbackKitError, ValueError):
    """A handler returned a value that cannot be turned into a reply."""


class EncryptorNotConfiguredError(CallbackKitError):
    """Raised when safe mode is active but no encryptor was provided."""


class DecryptError(CallbackKitError):
    """The encryptor failed to decrypt an inbound envelope."""


class EncryptError(CallbackKitError):
    """The encryptor failed to encrypt an outbound reply."""
