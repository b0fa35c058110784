"""Safe-mode encryptor contract."""

from callbackkit.providers.encryptor.base import Encryptor
from callbackkit.providers.encryptor.mock import MockEncryptor

__all__ = [
    "Encryptor",
    "MockEncryptor",
]
