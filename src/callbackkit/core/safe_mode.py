"""Safe-mode envelope: detect, unwrap and wrap encrypted callbacks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from callbackkit.core.errors import (
    DecryptError,
    EncryptError,
    EncryptorNotConfiguredError,
    InvalidContentError,
)
from callbackkit.models.enums import EncryptType
from callbackkit.models.request import IncomingRequest
from callbackkit.providers.encryptor.base import Encryptor

logger = logging.getLogger("callbackkit.safe_mode")

ENCRYPT_TYPE_AES = EncryptType.AES.value


class EncryptedEnvelope(BaseModel):
    """The encrypted fields of a safe-mode request body."""

    encrypt: str
    msg_signature: str = ""
    nonce: str = ""
    timestamp: int = 0


def is_safe_mode(request: IncomingRequest, *, always: bool = False) -> bool:
    """Return True if *request* travels in safe mode.

    *always* forces safe mode regardless of the request, for endpoints that
    are only ever configured with encryption.
    """
    return always or request.encrypt_type == ENCRYPT_TYPE_AES


def extract_envelope(payload: Mapping[str, Any], request: IncomingRequest) -> EncryptedEnvelope:
    """Read the envelope fields from a parsed safe-mode body.

    ``MsgSignature``, ``Nonce`` and ``TimeStamp`` fall back to the
    ``msg_signature``, ``nonce`` and ``timestamp`` query parameters when the
    body omits them.
    """
    timestamp = payload.get("TimeStamp") or request.timestamp or 0
    try:
        timestamp = int(timestamp)
    except (TypeError, ValueError) as exc:
        raise InvalidContentError(f"Invalid message content: bad timestamp {timestamp!r}") from exc

    return EncryptedEnvelope(
        encrypt=str(payload.get("Encrypt", "")),
        msg_signature=str(payload.get("MsgSignature") or request.msg_signature or ""),
        nonce=str(payload.get("Nonce") or request.nonce or ""),
        timestamp=timestamp,
    )


def unwrap(
    payload: Mapping[str, Any],
    request: IncomingRequest,
    encryptor: Encryptor | None,
) -> str:
    """Decrypt a safe-mode body and return the plaintext message.

    The plaintext is not validated here; verifying the envelope signature
    is the encryptor's job.

    Raises:
        EncryptorNotConfiguredError: If no encryptor is available.
        DecryptError: If the encryptor fails.
    """
    if encryptor is None:
        raise EncryptorNotConfiguredError("Safe mode request received but no encryptor is set")

    envelope = extract_envelope(payload, request)
    logger.debug("Decrypting safe-mode message: encryptor=%s", encryptor.name)
    try:
        return encryptor.decrypt(
            envelope.encrypt,
            envelope.msg_signature,
            envelope.nonce,
            envelope.timestamp,
        )
    except DecryptError:
        raise
    except Exception as exc:
        raise DecryptError(f"{encryptor.name} failed to decrypt message: {exc}") from exc


def wrap(plaintext: str, encryptor: Encryptor | None) -> str:
    """Encrypt a rendered reply.

    Raises:
        EncryptorNotConfiguredError: If no encryptor is available.
        EncryptError: If the encryptor fails.
    """
    if encryptor is None:
        raise EncryptorNotConfiguredError("Safe mode reply requested but no encryptor is set")

    logger.debug("Encrypting safe-mode reply: encryptor=%s", encryptor.name)
    try:
        return encryptor.encrypt(plaintext)
    except EncryptError:
        raise
    except Exception as exc:
        raise EncryptError(f"{encryptor.name} failed to encrypt reply: {exc}") from exc
