"""Document store health.

/health and /ready both ask the same question: can this process read the
documents table? The answer also carries how many expired rows are waiting
for the retention purge, which is the first thing to look at when the
table keeps growing.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.document import Document
from .logging_config import get_logger

logger = get_logger(__name__)


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


@dataclass
class ComponentHealth:
    status: HealthStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

    def as_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "latency_ms": self.latency_ms,
            **self.details,
        }


def check_document_store(
    db: Session,
    clock: Callable[[], float] = time.time,
) -> ComponentHealth:
    """Read from the documents table and count rows past their expiry.

    A missing table (migrations not applied) is reported the same way as
    a lost connection. Driver error text stays in the log, not the response.
    """
    started = time.perf_counter()
    try:
        db.execute(select(Document.id).limit(1))
        pending_purge = db.execute(
            select(func.count())
            .select_from(Document)
            .where(Document.expires_at <= int(clock()))
        ).scalar_one()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Document store health check failed: {e}", exc_info=True)
        return ComponentHealth(
            status=HealthStatus.UNHEALTHY,
            message="Document store unreachable",
        )

    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        message="Documents table reachable",
        latency_ms=round((time.perf_counter() - started) * 1000, 2),
        details={"expired_pending_purge": pending_purge},
    )
