"""Document error hierarchy shared by the server and the client.

Server-side failures (StoreUnavailableError, KeyExhaustionError) surface to
HTTP callers as a generic 500. Client-observable failures (EmptyContentError,
DocumentNotFoundError, TransportError) are recovered by the lifecycle
controller.
"""

from typing import Optional


class HasteError(Exception):
    """Base exception for document operations."""
    pass


class EmptyContentError(HasteError):
    """Raised when content is empty or whitespace-only."""

    def __init__(self, message: str = "No content provided"):
        super().__init__(message)


class ContentTooLargeError(HasteError):
    """Raised when content exceeds the configured maximum size."""

    def __init__(self, size_bytes: int, max_size: int):
        self.size_bytes = size_bytes
        self.max_size = max_size
        super().__init__(f"Document exceeds maximum size of {max_size} bytes")


class DocumentNotFoundError(HasteError):
    """Raised when a document is missing or expired."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("Document not found")


class TransportError(HasteError):
    """Raised by the storage client on network or protocol failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class StoreUnavailableError(HasteError):
    """Raised when the document store backend fails."""
    pass


class KeyExhaustionError(HasteError):
    """Raised when no free key was found within the retry bound."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Failed to generate unique key after {attempts} attempts")
