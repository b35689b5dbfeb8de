"""Haste - Main FastAPI Application

Pastebin-style document server.

This module creates and configures the FastAPI application, including:
- Document routes (/documents, /raw)
- Middleware (request ID correlation, CORS)
- Exception handlers mapping document errors to {"message": ...} bodies
- Health and observability endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .config import get_settings
from .database import engine
from .domain.documents.errors import (
    EmptyContentError,
    ContentTooLargeError,
    DocumentNotFoundError,
    KeyExhaustionError,
    StoreUnavailableError,
)
from .models import Base

# Observability
from .observability.logging_config import configure_logging
from .observability.middleware import RequestIDMiddleware
from .observability.router import router as observability_router

# Domain Routers
from .documents.router import router as documents_router

settings = get_settings()

# Configure logging
configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler.

    - Startup: create tables when AUTO_CREATE_TABLES is set (dev/sqlite)
    - Shutdown: dispose the connection pool
    """
    logger.info(f"{settings.APP_NAME} API starting up...")
    logger.info(f"Environment: {settings.ENV}")

    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")

    yield

    logger.info(f"{settings.APP_NAME} API shutting down...")
    engine.dispose()


app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Store and retrieve text documents by short keys",
    version=__version__,
    docs_url="/docs" if settings.ENV != "production" else None,
    redoc_url="/redoc" if settings.ENV != "production" else None,
    openapi_url="/openapi.json" if settings.ENV != "production" else None,
    lifespan=lifespan,
)


# =============================================================================
# MIDDLEWARE CONFIGURATION
# =============================================================================

app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@app.exception_handler(EmptyContentError)
@app.exception_handler(ContentTooLargeError)
async def rejected_content_handler(request: Request, exc: Exception) -> JSONResponse:
    """Empty or oversized content is a client error."""
    return _message(status.HTTP_400_BAD_REQUEST, str(exc))


@app.exception_handler(DocumentNotFoundError)
async def not_found_handler(request: Request, exc: DocumentNotFoundError) -> JSONResponse:
    return _message(status.HTTP_404_NOT_FOUND, "Document not found")


@app.exception_handler(StoreUnavailableError)
@app.exception_handler(KeyExhaustionError)
async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Store and key failures are logged in full and reported generically."""
    logger.error(
        f"Document store error on {request.method} {request.url.path}",
        exc_info=exc,
    )
    message = "Error saving document" if request.method == "POST" else "Error retrieving document"
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Validation error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(
    request: Request,
    exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database errors not already wrapped by the document store."""
    logger.error(
        f"Database error on {request.method} {request.url.path}",
        exc_info=exc
    )
    return _message(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "A database error occurred. Please try again later.",
    )


@app.exception_handler(Exception)
async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle uncaught exceptions.

    Full details are logged but not exposed to the client.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}",
        exc_info=exc
    )
    return _message(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please try again later.",
    )


# =============================================================================
# ROUTER REGISTRATION
# =============================================================================

# Observability (health, metrics, ready)
app.include_router(observability_router)

# Documents
app.include_router(documents_router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, Any]:
    """Root endpoint - API information."""
    return {
        "name": f"{settings.APP_NAME} API",
        "version": __version__,
        "status": "running",
    }


def create_app() -> FastAPI:
    """Application factory for creating test instances."""
    return app


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(
        "haste.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=settings.ENV == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
