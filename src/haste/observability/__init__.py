"""Observability module for Haste.

Provides structured logging, metrics, request correlation and health checks.
"""

from .logging_config import configure_logging, get_logger
from .metrics import (
    documents_created_total,
    documents_retrieved_total,
    documents_rejected_total,
    key_collisions_total,
    documents_purged_total,
    request_duration_seconds,
)
from .request_id import (
    request_id_var,
    get_request_id,
    set_request_id,
    reset_request_id,
    resolve_request_id,
    generate_request_id,
)
from .health import HealthStatus, ComponentHealth, check_document_store

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Metrics
    "documents_created_total",
    "documents_retrieved_total",
    "documents_rejected_total",
    "key_collisions_total",
    "documents_purged_total",
    "request_duration_seconds",
    # Request ID
    "request_id_var",
    "get_request_id",
    "set_request_id",
    "reset_request_id",
    "resolve_request_id",
    "generate_request_id",
    # Health
    "HealthStatus",
    "ComponentHealth",
    "check_document_store",
]
