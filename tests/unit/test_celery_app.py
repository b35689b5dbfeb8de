"""Unit tests for the Celery application configuration."""

from datetime import timedelta

from haste.config import get_settings
from haste.workers.celery_app import celery_app


def test_purge_scheduled_at_configured_interval():
    entry = celery_app.conf.beat_schedule["retention-purge-expired"]

    assert entry["task"] == "retention.purge_expired"
    assert entry["schedule"] == timedelta(minutes=get_settings().PURGE_INTERVAL_MINUTES)


def test_retention_task_registered():
    celery_app.loader.import_default_modules()

    assert "retention.purge_expired" in celery_app.tasks
