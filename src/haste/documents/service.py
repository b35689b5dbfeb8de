"""Document service - validation and key assignment over the document store.

A thin, synchronous-per-request layer between the HTTP routes and the store:
create() validates and assigns a fresh key, retrieve() translates a missing
or expired row into DocumentNotFoundError.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import Settings
from ..domain.documents.errors import (
    DocumentNotFoundError,
    EmptyContentError,
    ContentTooLargeError,
)
from ..domain.documents.keys import KeyGenerator
from ..domain.documents.ports import DocumentStorePort
from ..domain.documents.validation import validate_content
from ..observability.metrics import (
    documents_created_total,
    documents_retrieved_total,
    documents_rejected_total,
)

logger = logging.getLogger(__name__)

# Reserved key served from ABOUT_DOCUMENT_PATH instead of the store
ABOUT_KEY = "about"


@dataclass(frozen=True)
class RetrievedDocument:
    key: str
    content: str
    language: Optional[str] = None


class DocumentService:
    """Service for creating and retrieving documents.

    Args:
        store: Document store adapter
        key_generator: Generator checked against the same store
        settings: Size limit, key length and about-document configuration
    """

    def __init__(
        self,
        store: DocumentStorePort,
        key_generator: KeyGenerator,
        settings: Settings,
    ):
        self.store = store
        self.key_generator = key_generator
        self.settings = settings

    def create(self, content: str, expire_days: Optional[int] = None) -> str:
        """Validate and store new content under a fresh key.

        Args:
            content: Document text
            expire_days: Days until expiry (store default if None)

        Returns:
            The assigned key

        Raises:
            EmptyContentError: If content is blank
            ContentTooLargeError: If content exceeds MAX_PASTE_SIZE bytes
            KeyExhaustionError: If no free key was found
            StoreUnavailableError: If the store fails
        """
        try:
            validate_content(content, self.settings.MAX_PASTE_SIZE)
        except EmptyContentError:
            documents_rejected_total.labels(reason="empty").inc()
            raise
        except ContentTooLargeError as e:
            documents_rejected_total.labels(reason="too_large").inc()
            logger.info(
                f"Rejected document of {e.size_bytes} bytes (max {e.max_size})"
            )
            raise

        key = self.key_generator.generate_unique(self.settings.KEY_LENGTH)
        self.store.set(key, content, expire_days)

        documents_created_total.inc()
        logger.info(
            "Document created",
            extra={"document_key": key},
        )
        return key

    def retrieve(self, key: str) -> RetrievedDocument:
        """Fetch live content for key.

        Raises:
            DocumentNotFoundError: If the document is missing or expired
            StoreUnavailableError: If the store fails
        """
        if key == ABOUT_KEY:
            about = self._load_about()
            if about is not None:
                return RetrievedDocument(key=ABOUT_KEY, content=about, language="markdown")

        content = self.store.get(key)
        if content is None:
            documents_retrieved_total.labels(status="not_found").inc()
            raise DocumentNotFoundError(key)

        documents_retrieved_total.labels(status="found").inc()
        return RetrievedDocument(key=key, content=content)

    def _load_about(self) -> Optional[str]:
        if not self.settings.ABOUT_DOCUMENT_PATH:
            return None

        path = Path(self.settings.ABOUT_DOCUMENT_PATH)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Error loading about document {path}: {e}")
            return None
