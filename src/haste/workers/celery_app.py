"""Celery application for background document maintenance.

Run a worker with the beat scheduler embedded:

    celery -A haste.workers.celery_app worker --beat --loglevel=info
"""

from datetime import timedelta

from celery import Celery

from ..config import get_settings

settings = get_settings()

celery_app = Celery(
    "haste",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["haste.retention.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone="UTC",
    enable_utc=True,
)

celery_app.conf.beat_schedule = {
    'retention-purge-expired': {
        'task': 'retention.purge_expired',
        'schedule': timedelta(minutes=settings.PURGE_INTERVAL_MINUTES),
        'options': {
            # A missed run is superseded by the next one
            'expires': settings.PURGE_INTERVAL_MINUTES * 60,
        },
    },
}
