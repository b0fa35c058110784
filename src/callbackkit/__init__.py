"""callbackkit - Inbound callback guard for official-account messaging platforms."""

from callbackkit._version import __version__
from callbackkit.core.config import GuardConfig
from callbackkit.core.dispatcher import (
    DEFAULT_MESSAGE_TYPE,
    MESSAGE_TYPE_MAPPING,
    HandlerRegistration,
    MessageDispatcher,
    handle_message,
    resolve_tag,
)
from callbackkit.core.errors import (
    BadRequestError,
    CallbackKitError,
    DecryptError,
    EmptyMessageError,
    EncryptError,
    EncryptorNotConfiguredError,
    InvalidArgumentError,
    InvalidContentError,
    InvalidSignatureError,
)
from callbackkit.core.guard import Guard
from callbackkit.core.parser import parse_body, parse_message
from callbackkit.core.response import SUCCESS_EMPTY_RESPONSE, build_response, is_message
from callbackkit.core.safe_mode import EncryptedEnvelope, extract_envelope, is_safe_mode, unwrap, wrap
from callbackkit.core.signature import compute_signature, validate_signature
from callbackkit.models.enums import EncryptType, MessageTag, ReplyType
from callbackkit.models.message import Message
from callbackkit.models.reply import (
    Image,
    Music,
    News,
    NewsItem,
    Raw,
    Renderable,
    ReplyMessage,
    Text,
    Transfer,
    Video,
    Voice,
)
from callbackkit.models.request import IncomingRequest
from callbackkit.models.response import GuardResponse, ResponseEnvelope
from callbackkit.providers.encryptor import Encryptor, MockEncryptor

__all__ = [
    "DEFAULT_MESSAGE_TYPE",
    "MESSAGE_TYPE_MAPPING",
    "SUCCESS_EMPTY_RESPONSE",
    "BadRequestError",
    "CallbackKitError",
    "DecryptError",
    "EmptyMessageError",
    "EncryptError",
    "EncryptType",
    "EncryptedEnvelope",
    "Encryptor",
    "EncryptorNotConfiguredError",
    "Guard",
    "GuardConfig",
    "GuardResponse",
    "HandlerRegistration",
    "Image",
    "IncomingRequest",
    "InvalidArgumentError",
    "InvalidContentError",
    "InvalidSignatureError",
    "Message",
    "MessageDispatcher",
    "MessageTag",
    "MockEncryptor",
    "Music",
    "News",
    "NewsItem",
    "Raw",
    "Renderable",
    "ReplyMessage",
    "ReplyType",
    "ResponseEnvelope",
    "Text",
    "Transfer",
    "Video",
    "Voice",
    "__version__",
    "build_response",
    "compute_signature",
    "extract_envelope",
    "handle_message",
    "is_message",
    "is_safe_mode",
    "parse_body",
    "parse_message",
    "resolve_tag",
    "unwrap",
    "validate_signature",
    "wrap",
]
