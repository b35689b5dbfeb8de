"""Documents domain module - keys, validation, store port and errors"""

from .errors import (
    HasteError,
    EmptyContentError,
    ContentTooLargeError,
    DocumentNotFoundError,
    TransportError,
    StoreUnavailableError,
    KeyExhaustionError,
)
from .keys import KeyGenerator, generate_key, MIN_KEY_LENGTH, MAX_KEY_ATTEMPTS
from .validation import validate_content, content_size_bytes, is_blank

__all__ = [
    "HasteError",
    "EmptyContentError",
    "ContentTooLargeError",
    "DocumentNotFoundError",
    "TransportError",
    "StoreUnavailableError",
    "KeyExhaustionError",
    "KeyGenerator",
    "generate_key",
    "MIN_KEY_LENGTH",
    "MAX_KEY_ATTEMPTS",
    "validate_content",
    "content_size_bytes",
    "is_blank",
]
