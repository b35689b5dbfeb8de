"""Pydantic schemas for retention statistics."""

from datetime import datetime

from pydantic import BaseModel, Field


class RetentionStatistics(BaseModel):
    """Statistics from one purge of expired documents."""

    job_started_at: datetime = Field(description="When the purge started")
    job_completed_at: datetime = Field(description="When the purge finished")
    duration_seconds: float = Field(ge=0, description="Purge execution time")
    documents_purged: int = Field(default=0, ge=0, description="Expired documents deleted")

    @property
    def has_purged(self) -> bool:
        return self.documents_purged > 0
