from .sql_document_store import SQLDocumentStore

__all__ = ["SQLDocumentStore"]
