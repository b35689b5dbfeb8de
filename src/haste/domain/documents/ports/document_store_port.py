"""Document Store Port - Domain interface for key-value document persistence.

Adapters implement this interface over a concrete backend (SQL database).

Architecture: Hexagonal - Port interface in domain layer
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

# Passing this (or any value <= 0) as expire_days stores a document that never expires
NO_EXPIRY = 0

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class StoredDocument:
    """Full stored row, for inspection.

    Attributes:
        id: Document key
        content: Document text
        created_at: Unix timestamp (seconds) of the last write
        expires_at: Unix timestamp (seconds) of expiry, None for never
        views: Number of successful retrievals
    """
    id: str
    content: str
    created_at: int
    expires_at: Optional[int]
    views: int

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and self.expires_at <= now


class DocumentStorePort(ABC):
    """Port interface for document persistence.

    Key Design Principles:
    - Expiry is enforced on read: an expired row behaves exactly like a missing one
    - set() is an atomic upsert that preserves the view counter
    - Every successful get() records one view
    - Backend failures raise StoreUnavailableError, never partial writes

    Example Usage:
        store = SQLDocumentStore(session, default_expire_days=30)
        store.set("bakuda-sonu", "print('hi')")
        content = store.get("bakuda-sonu")
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return live content for key and record a view.

        Returns:
            Content, or None if the document is missing or expired

        Raises:
            StoreUnavailableError: If the backend fails
        """
        pass

    @abstractmethod
    def set(self, key: str, content: str, expire_days: Optional[int] = None) -> None:
        """Insert or replace a document.

        Replaces content, created_at and expires_at of an existing key while
        preserving its view count.

        Args:
            key: Document key
            content: Document text
            expire_days: Days until expiry; None uses the store default,
                NO_EXPIRY (or any value <= 0) never expires

        Raises:
            StoreUnavailableError: If the backend fails
        """
        pass

    @abstractmethod
    def record_view(self, key: str) -> None:
        """Increment the view counter of key by one."""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether key is occupied, including expired rows not yet purged."""
        pass

    @abstractmethod
    def purge_expired(self) -> int:
        """Delete all rows whose expiry has passed.

        Returns:
            Number of rows removed
        """
        pass

    @abstractmethod
    def get_document(self, key: str) -> Optional[StoredDocument]:
        """Return the full row without recording a view or filtering expiry."""
        pass
