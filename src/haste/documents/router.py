"""Document API endpoints.

GET  /documents/{key}  -> 200 {content, key, language?} | 404 {message}
POST /documents        -> 201 {key} | 400 {message} | 500 {message}
GET  /raw/{key}        -> 200 text/plain | 404

Domain errors raised here are mapped to responses by the exception
handlers registered in haste.main.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ..dependencies import get_document_service
from ..domain.documents.errors import DocumentNotFoundError
from ..observability.metrics import documents_rejected_total
from .schemas import DocumentCreate, DocumentResponse, SaveResponse, ErrorResponse
from .service import DocumentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


def _invalid_body(message: str) -> JSONResponse:
    documents_rejected_total.labels(reason="invalid_body").inc()
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message},
    )


@router.get(
    "/documents/{key}",
    response_model=DocumentResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def get_document(
    key: str,
    service: DocumentService = Depends(get_document_service),
):
    """Get a document by key"""
    document = service.retrieve(key)
    return DocumentResponse(
        content=document.content,
        key=document.key,
        language=document.language,
    )


@router.post(
    "/documents",
    response_model=SaveResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_document(
    request: Request,
    service: DocumentService = Depends(get_document_service),
):
    """Create a document from a raw text body or a {"content": ...} JSON body"""
    body = await request.body()
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return _invalid_body("Document must be UTF-8 text")

    content_type = request.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            payload = DocumentCreate.model_validate(json.loads(text or "{}"))
        except (json.JSONDecodeError, ValidationError):
            return _invalid_body("Invalid JSON body")
        content = payload.content
    else:
        content = text

    key = await run_in_threadpool(service.create, content)
    return SaveResponse(key=key)


@router.get("/raw/{key}", response_class=PlainTextResponse)
def get_raw_document(
    key: str,
    service: DocumentService = Depends(get_document_service),
):
    """Get document content as plain text (for copy/download)"""
    try:
        document = service.retrieve(key)
    except DocumentNotFoundError:
        return PlainTextResponse("Document not found", status_code=status.HTTP_404_NOT_FOUND)

    return PlainTextResponse(document.content, media_type="text/plain; charset=utf-8")
