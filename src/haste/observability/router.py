"""Operational endpoints: Prometheus scrape target, health and readiness."""

import time

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from sqlalchemy.orm import Session

from ..database import get_db
from .health import check_document_store

router = APIRouter(tags=["Observability"])


@router.get("/metrics", include_in_schema=False)
def metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get(
    "/health",
    summary="Document store health",
    description="200 while the documents table is readable, 503 otherwise",
)
def health_check(db: Session = Depends(get_db)):
    store = check_document_store(db)
    return JSONResponse(
        content={
            "status": store.status.value,
            "timestamp": int(time.time() * 1000),
            "components": {"database": store.as_dict()},
        },
        status_code=200 if store.healthy else 503,
    )


@router.get("/ready", summary="Readiness check")
def readiness_check(db: Session = Depends(get_db)):
    store = check_document_store(db)
    if store.healthy:
        return {"status": "ready"}
    return JSONResponse(
        content={"status": "not_ready", "message": store.message},
        status_code=503,
    )
