from .document_store_port import (
    DocumentStorePort,
    StoredDocument,
    NO_EXPIRY,
    SECONDS_PER_DAY,
)

__all__ = [
    "DocumentStorePort",
    "StoredDocument",
    "NO_EXPIRY",
    "SECONDS_PER_DAY",
]
