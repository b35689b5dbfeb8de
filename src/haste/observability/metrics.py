"""Prometheus metrics for Haste.

Defines operational metrics for monitoring and alerting.
"""

from prometheus_client import Counter, Histogram

# Document metrics
documents_created_total = Counter(
    "haste_documents_created_total",
    "Total number of documents created"
)

documents_retrieved_total = Counter(
    "haste_documents_retrieved_total",
    "Total document retrievals",
    ["status"]  # status: found|not_found
)

documents_rejected_total = Counter(
    "haste_documents_rejected_total",
    "Total document submissions rejected by validation",
    ["reason"]  # reason: empty|too_large|invalid_body
)

key_collisions_total = Counter(
    "haste_key_collisions_total",
    "Generated keys that collided with a stored document"
)

# Retention metrics
documents_purged_total = Counter(
    "haste_documents_purged_total",
    "Total expired documents purged"
)

# HTTP metrics
request_duration_seconds = Histogram(
    "haste_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0]
)
