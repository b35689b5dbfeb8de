"""FastAPI dependencies wiring the document store and service per request."""

from fastapi import Depends
from sqlalchemy.orm import Session

from .config import Settings, get_settings
from .database import get_db
from .documents.service import DocumentService
from .domain.documents.keys import KeyGenerator
from .infrastructure.storage.sql_document_store import SQLDocumentStore


def get_document_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SQLDocumentStore:
    """Document store bound to the request's database session."""
    return SQLDocumentStore(db, default_expire_days=settings.DEFAULT_EXPIRE_DAYS)


def get_document_service(
    store: SQLDocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
) -> DocumentService:
    """Document service for the current request.

    Example:
        @router.get("/documents/{key}")
        def get_document(key: str, service: DocumentService = Depends(get_document_service)):
            return service.retrieve(key)
    """
    return DocumentService(store, KeyGenerator(store), settings)
