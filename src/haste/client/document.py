"""Client-side document model.

Pure, synchronous state with no I/O. A document is either a NewDocument
(never saved, no key) or a LoadedDocument (persisted under a key); the
lifecycle controller decides when the model changes.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class NewDocument:
    content: str = ""
    language: Optional[str] = None


@dataclass(frozen=True)
class LoadedDocument:
    content: str
    key: str
    language: Optional[str] = None


DocumentState = Union[NewDocument, LoadedDocument]


class DocumentModel:
    """Holds the document being edited or presented.

    dirty tracks whether content differs from what was last persisted
    (the empty string for a new document). locked is set once the content
    is backed by a stored key.
    """

    def __init__(self):
        self._state: DocumentState = NewDocument()
        self._persisted = ""
        self._dirty = False
        self._locked = False

    def get_content(self) -> str:
        return self._state.content

    def get_key(self) -> Optional[str]:
        if isinstance(self._state, LoadedDocument):
            return self._state.key
        return None

    def get_language(self) -> Optional[str]:
        return self._state.language

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def is_locked(self) -> bool:
        return self._locked

    def set_content(self, content: str) -> None:
        """Replace content, keeping the key (if any)."""
        self._state = replace(self._state, content=content)
        self._dirty = content != self._persisted

    def hydrate(self, document: LoadedDocument) -> None:
        """Replace the whole state with a document fetched from the server."""
        self._state = document
        self._persisted = document.content
        self._dirty = False
        self._locked = True

    def mark_saved(self, key: str, language: Optional[str] = None) -> None:
        """Promote the current content to a LoadedDocument stored under key."""
        self._state = LoadedDocument(
            content=self._state.content,
            key=key,
            language=language,
        )
        self._persisted = self._state.content
        self._dirty = False
        self._locked = True

    def reset(self) -> None:
        self._state = NewDocument()
        self._persisted = ""
        self._dirty = False
        self._locked = False

    def serialize(self) -> str:
        """Content sent to the server on save."""
        return self._state.content

    def duplicate(self) -> str:
        return self._state.content
