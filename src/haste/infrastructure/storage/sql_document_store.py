"""SQL Document Store - Implementation of DocumentStorePort using SQLAlchemy.

Every operation is a single statement committed on its own, so each row is
updated atomically and a failed operation leaves no partial write behind.
Upserts use INSERT ... ON CONFLICT DO UPDATE (PostgreSQL and SQLite); two
concurrent writers of the same key resolve last-writer-wins.

Architecture: Hexagonal - Adapter implementation in infrastructure layer
"""

import logging
import time
from typing import Callable, Optional

from sqlalchemy import delete, exists, or_, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...domain.documents.errors import StoreUnavailableError
from ...domain.documents.ports import (
    DocumentStorePort,
    StoredDocument,
    SECONDS_PER_DAY,
)
from ...models.document import Document

logger = logging.getLogger(__name__)

DEFAULT_EXPIRE_DAYS = 30

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLDocumentStore(DocumentStorePort):
    """Document store backed by the `documents` table.

    Args:
        db: SQLAlchemy session (committed per operation)
        default_expire_days: Expiry applied when set() gets no expire_days
        clock: Returns the current Unix time, injectable for tests

    Example:
        store = SQLDocumentStore(session, default_expire_days=30)
        store.set("bakuda-sonu", "hello")
        assert store.get("bakuda-sonu") == "hello"
    """

    def __init__(
        self,
        db: Session,
        default_expire_days: int = DEFAULT_EXPIRE_DAYS,
        clock: Callable[[], float] = time.time,
    ):
        self.db = db
        self.default_expire_days = default_expire_days
        self.clock = clock

    def _now(self) -> int:
        return int(self.clock())

    def _fail(self, operation: str, key: Optional[str], exc: SQLAlchemyError) -> StoreUnavailableError:
        self.db.rollback()
        logger.error(
            f"Document store {operation} failed: {exc}",
            extra={"document_key": key},
            exc_info=True,
        )
        return StoreUnavailableError(f"Document store {operation} failed")

    def get(self, key: str) -> Optional[str]:
        now = self._now()
        stmt = select(Document.content).where(
            Document.id == key,
            or_(Document.expires_at.is_(None), Document.expires_at > now),
        )
        try:
            content = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._fail("get", key, e) from e

        if content is None:
            return None

        try:
            self.record_view(key)
        except StoreUnavailableError:
            logger.warning("View not recorded", extra={"document_key": key})
        return content

    def set(self, key: str, content: str, expire_days: Optional[int] = None) -> None:
        now = self._now()
        days = self.default_expire_days if expire_days is None else expire_days
        expires_at = now + days * SECONDS_PER_DAY if days > 0 else None

        try:
            insert = _UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
            if insert is not None:
                stmt = insert(Document).values(
                    id=key,
                    content=content,
                    created_at=now,
                    expires_at=expires_at,
                    views=0,
                )
                stmt = stmt.on_conflict_do_update(
                    index_elements=[Document.id],
                    set_={
                        "content": stmt.excluded.content,
                        "created_at": stmt.excluded.created_at,
                        "expires_at": stmt.excluded.expires_at,
                    },
                )
                self.db.execute(stmt)
            else:
                self._set_portable(key, content, now, expires_at)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("set", key, e) from e

        logger.debug(
            "Stored document",
            extra={"document_key": key},
        )

    def _set_portable(self, key: str, content: str, now: int, expires_at: Optional[int]) -> None:
        """Upsert for dialects without ON CONFLICT support."""
        document = self.db.get(Document, key, with_for_update=True)
        if document is None:
            self.db.add(Document(
                id=key,
                content=content,
                created_at=now,
                expires_at=expires_at,
                views=0,
            ))
        else:
            document.content = content
            document.created_at = now
            document.expires_at = expires_at
        self.db.flush()

    def record_view(self, key: str) -> None:
        stmt = (
            update(Document)
            .where(Document.id == key)
            .values(views=Document.views + 1)
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("record_view", key, e) from e

    def exists(self, key: str) -> bool:
        try:
            return bool(self.db.execute(select(exists().where(Document.id == key))).scalar())
        except SQLAlchemyError as e:
            raise self._fail("exists", key, e) from e

    def purge_expired(self) -> int:
        now = self._now()
        stmt = delete(Document).where(
            Document.expires_at.is_not(None),
            Document.expires_at <= now,
        )
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("purge_expired", None, e) from e

        return result.rowcount or 0

    def get_document(self, key: str) -> Optional[StoredDocument]:
        try:
            document = self.db.execute(
                select(Document).where(Document.id == key)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._fail("get_document", key, e) from e

        if document is None:
            return None

        return StoredDocument(
            id=document.id,
            content=document.content,
            created_at=document.created_at,
            expires_at=document.expires_at,
            views=document.views,
        )
