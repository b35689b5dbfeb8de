"""Retention service - deletes documents past their expiry.

Reads already ignore expired rows, so purging is housekeeping only and is
idempotent: a second run in succession deletes nothing.
"""

import logging
from datetime import datetime, timezone

from ..domain.documents.ports import DocumentStorePort
from ..observability.metrics import documents_purged_total
from .schemas import RetentionStatistics

logger = logging.getLogger(__name__)


class RetentionService:
    """Runs retention cleanup against a document store.

    Args:
        store: Document store to purge
    """

    def __init__(self, store: DocumentStorePort):
        self.store = store

    def purge_expired(self) -> RetentionStatistics:
        """Delete expired documents and report what was removed.

        Raises:
            StoreUnavailableError: If the store fails
        """
        started_at = datetime.now(timezone.utc)

        purged = self.store.purge_expired()
        documents_purged_total.inc(purged)

        completed_at = datetime.now(timezone.utc)
        statistics = RetentionStatistics(
            job_started_at=started_at,
            job_completed_at=completed_at,
            duration_seconds=(completed_at - started_at).total_seconds(),
            documents_purged=purged,
        )

        logger.info(
            f"Retention purge removed {purged} expired documents",
            extra={"duration_ms": round(statistics.duration_seconds * 1000, 2)},
        )
        return statistics
