"""Shared test fixtures and helpers."""

from __future__ import annotations

import time
from typing import Any

import pytest

from callbackkit.core.signature import compute_signature
from callbackkit.models.request import IncomingRequest
from callbackkit.providers.encryptor.mock import MockEncryptor

TOKEN = "mock-token"


def make_request(
    body: bytes | str = "<xml><name>foo</name></xml>",
    url: str = "http://localhost/path/to/resource?foo=bar",
    **form: Any,
) -> IncomingRequest:
    return IncomingRequest.create(url, "POST", form=form, body=body)


def signed_params(
    token: str = TOKEN,
    timestamp: int | None = None,
    nonce: str = "foobar",
    **extra: Any,
) -> dict[str, Any]:
    """Form parameters of a correctly signed callback."""
    ts = timestamp if timestamp is not None else int(time.time())
    return {
        "timestamp": ts,
        "nonce": nonce,
        "signature": compute_signature(token, ts, nonce),
        **extra,
    }


@pytest.fixture
def encryptor() -> MockEncryptor:
    return MockEncryptor()
