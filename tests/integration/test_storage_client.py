"""Integration tests for StorageClient against the real app.

Requests go through httpx.ASGITransport, so no server is started.
"""

import httpx
import pytest

from haste.client.storage import StorageClient
from haste.domain.documents.errors import (
    DocumentNotFoundError,
    EmptyContentError,
    TransportError,
)


def asgi_client(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


class TestStorageClient:

    @pytest.mark.asyncio
    async def test_save_then_load(self, app):
        async with asgi_client(app) as http:
            storage = StorageClient(client=http)

            result = await storage.save("fn main() {}")
            loaded = await storage.load(result.key)

        assert loaded.key == result.key
        assert loaded.content == "fn main() {}"

    @pytest.mark.asyncio
    async def test_load_unknown_key(self, app):
        async with asgi_client(app) as http:
            with pytest.raises(DocumentNotFoundError):
                await StorageClient(client=http).load("ghost")

    @pytest.mark.asyncio
    async def test_blank_save_makes_no_request(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(201, json={"key": "never"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as http:
            with pytest.raises(EmptyContentError):
                await StorageClient(client=http).save(" \n\t")

        assert requests == []

    @pytest.mark.asyncio
    async def test_rejected_save_is_transport_error(self, app, test_settings):
        async with asgi_client(app) as http:
            with pytest.raises(TransportError) as exc:
                await StorageClient(client=http).save("x" * (test_settings.MAX_PASTE_SIZE + 1))

        assert exc.value.status_code == 400

    @pytest.mark.asyncio
    async def test_network_failure_is_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as http:
            with pytest.raises(TransportError):
                await StorageClient(client=http).load("bakuda")

    @pytest.mark.asyncio
    async def test_malformed_payload_is_transport_error(self):
        def handler(request):
            return httpx.Response(200, json={"unexpected": True})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as http:
            with pytest.raises(TransportError):
                await StorageClient(client=http).load("bakuda")

    @pytest.mark.asyncio
    async def test_key_is_escaped_as_one_path_segment(self):
        seen = []

        def handler(request):
            seen.append(request.url)
            return httpx.Response(404, json={"message": "Document not found"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver") as http:
            with pytest.raises(DocumentNotFoundError):
                await StorageClient(client=http).load("a/b?c#d")

        assert seen[0].raw_path == b"/documents/a%2Fb%3Fc%23d"
        assert seen[0].query == b""

    @pytest.mark.asyncio
    async def test_supplied_client_left_open(self):
        http = httpx.AsyncClient(base_url="http://testserver")

        async with StorageClient(client=http):
            pass

        assert not http.is_closed
        await http.aclose()
