"""Celery tasks for document retention.

Tasks:
- purge_expired_documents_task: scheduled every PURGE_INTERVAL_MINUTES by
  the beat schedule in haste.workers.celery_app
"""

import logging
from typing import Dict, Any

from celery import shared_task

from ..config import get_settings
from ..database import SessionLocal
from ..infrastructure.storage.sql_document_store import SQLDocumentStore
from .service import RetentionService

logger = logging.getLogger(__name__)


@shared_task(name="retention.purge_expired", bind=True)
def purge_expired_documents_task(self) -> Dict[str, Any]:
    """Delete every document whose expiry time has passed.

    The task is idempotent - safe to run multiple times without side effects.

    Returns:
        Dict with purge statistics:
        - status: 'completed' or 'failed'
        - documents_purged: Number of documents deleted
        - duration_seconds: Total execution time

    Raises:
        Exception: Logs errors but does not raise (task always completes)
    """
    logger.info("Retention purge task started")

    db = SessionLocal()
    try:
        store = SQLDocumentStore(db, default_expire_days=get_settings().DEFAULT_EXPIRE_DAYS)
        statistics = RetentionService(store).purge_expired()

        result = {
            'status': 'completed',
            'job_started_at': statistics.job_started_at.isoformat(),
            'job_completed_at': statistics.job_completed_at.isoformat(),
            'duration_seconds': statistics.duration_seconds,
            'documents_purged': statistics.documents_purged,
        }

        logger.info("Retention purge task completed successfully")
        return result

    except Exception as e:
        logger.error(
            "Retention purge task failed",
            exc_info=True,
        )

        # Return error status but don't raise (allow task to complete)
        return {
            'status': 'failed',
            'error': str(e),
            'documents_purged': 0,
        }

    finally:
        db.close()
