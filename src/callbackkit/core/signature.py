"""Request signature verification."""

from __future__ import annotations

import hashlib
import hmac
import logging

from callbackkit.core.errors import InvalidSignatureError
from callbackkit.models.request import IncomingRequest

logger = logging.getLogger("callbackkit.signature")


def compute_signature(token: str, timestamp: str | int, nonce: str) -> str:
    """Return the SHA-1 signature the platform sends for these values.

    The three values are sorted as strings, not numerically, then joined.
    """
    parts = sorted([token, str(timestamp), nonce])
    return hashlib.sha1("".join(parts).encode()).hexdigest()  # noqa: S324  # nosec B324


def validate_signature(
    request: IncomingRequest,
    token: str | None,
    *,
    enforce: bool = False,
) -> None:
    """Verify the ``signature`` parameter of *request*.

    Requests that carry no signature pass, so endpoints work before the
    platform is configured to sign callbacks.  Set *enforce* to reject them.

    Raises:
        InvalidSignatureError: If the signature is missing while enforced,
            or does not match.
    """
    signature = request.signature
    if not signature:
        if enforce:
            logger.debug("Rejecting unsigned request to %s", request.uri)
            raise InvalidSignatureError()
        return

    expected = compute_signature(token or "", request.timestamp or "", request.nonce or "")
    if not hmac.compare_digest(expected.encode(), signature.encode()):
        raise InvalidSignatureError()
