"""Document service and HTTP endpoints."""

from .service import DocumentService, RetrievedDocument, ABOUT_KEY

__all__ = [
    "DocumentService",
    "RetrievedDocument",
    "ABOUT_KEY",
]
