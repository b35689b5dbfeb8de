"""Pydantic schemas for the document endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class DocumentCreate(BaseModel):
    """JSON body accepted by POST /documents (raw text bodies are also accepted)."""
    content: str = ""


class DocumentResponse(BaseModel):
    """Document returned by GET /documents/{key}."""
    content: str
    key: str
    language: Optional[str] = None


class SaveResponse(BaseModel):
    """Key assigned to a newly created document."""
    key: str = Field(description="Short key of the stored document")


class ErrorResponse(BaseModel):
    message: str
