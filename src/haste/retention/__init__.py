"""Retention module - purging of expired documents."""

from .schemas import RetentionStatistics
from .service import RetentionService

__all__ = [
    "RetentionStatistics",
    "RetentionService",
]
