"""HTTP storage client for the document server.

All network I/O for the client lives here. Results are plain dataclasses;
failures raise from the shared document error hierarchy. Requests are
never retried.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import httpx

from ..domain.documents.errors import (
    DocumentNotFoundError,
    EmptyContentError,
    TransportError,
)
from ..domain.documents.validation import is_blank
from .document import LoadedDocument

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class SaveResult:
    key: str
    language: Optional[str] = None


class StorageClient:
    """Async client for the /documents endpoints.

    Args:
        base_url: Server base URL (ignored when client is supplied)
        client: Existing httpx.AsyncClient; the caller keeps ownership
        timeout: Request timeout in seconds for a client created here

    Example:
        async with StorageClient("http://localhost:8000") as storage:
            result = await storage.save("print('hi')")
            document = await storage.load(result.key)
    """

    def __init__(
        self,
        base_url: str = "",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def load(self, key: str) -> LoadedDocument:
        """Fetch a document by key.

        Raises:
            DocumentNotFoundError: If the server has no live document for key
            TransportError: On network failure, unexpected status or bad payload
        """
        try:
            response = await self._client.get(f"/documents/{quote(key, safe='')}")
        except httpx.HTTPError as e:
            logger.warning(f"Load request failed: {e}", extra={"document_key": key})
            raise TransportError(f"Failed to load document: {e}") from e

        if response.status_code == 404:
            raise DocumentNotFoundError(key)
        if not response.is_success:
            raise TransportError(
                f"Failed to load document: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            return LoadedDocument(
                content=data["content"],
                key=data["key"],
                language=data.get("language"),
            )
        except (ValueError, KeyError, TypeError) as e:
            raise TransportError("Malformed document response") from e

    async def save(self, content: str) -> SaveResult:
        """Store content and return its new key.

        Raises:
            EmptyContentError: If content is blank (no request is made)
            TransportError: On network failure, unexpected status or bad payload
        """
        if is_blank(content):
            raise EmptyContentError("Cannot save empty document")

        try:
            response = await self._client.post(
                "/documents",
                content=content.encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
            )
        except httpx.HTTPError as e:
            logger.warning(f"Save request failed: {e}")
            raise TransportError(f"Failed to save document: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"Failed to save document: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return SaveResult(key=response.json()["key"])
        except (ValueError, KeyError, TypeError) as e:
            raise TransportError("Malformed save response") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "StorageClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
