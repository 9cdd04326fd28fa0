"""
Tests for ProviderClient - base HTTP client shared by provider adapters.

Uses respx to mock httpx calls and verifies:
- Non-2xx responses raise ProviderError with status and body
- Transport failures raise ProviderError without status
- Configuration is immutable after construction
"""

import httpx
import pytest
import respx

from src.adapters.api.provider_client import ProviderClient
from src.core.errors import ProviderError

BASE_URL = "https://api.example.test"


@pytest.fixture
def client() -> ProviderClient:
    return ProviderClient(base_url=BASE_URL, headers={"X-Test": "1"}, timeout=5.0)


class TestProviderClientConfig:
    """Tests for the immutable configuration."""

    def test_headers_are_read_only(self, client: ProviderClient):
        with pytest.raises(TypeError):
            client.headers["X-Test"] = "2"

    def test_exposes_base_url_and_timeout(self, client: ProviderClient):
        assert client.base_url == BASE_URL
        assert client.timeout == 5.0


class TestGetJson:
    """Tests for ProviderClient.get_json()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_decoded_body_and_sends_headers(self, client: ProviderClient):
        route = respx.get(f"{BASE_URL}/items").mock(
            return_value=httpx.Response(200, json={"ok": True})
        )

        data = await client.get_json("/items", params={"page": "2"})

        assert data == {"ok": True}
        request = route.calls.last.request
        assert request.headers["X-Test"] == "1"
        assert request.url.params["page"] == "2"
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error_carries_status_and_body(self, client: ProviderClient):
        respx.get(f"{BASE_URL}/missing").mock(
            return_value=httpx.Response(404, json={"status_message": "not found"})
        )

        with pytest.raises(ProviderError) as exc_info:
            await client.get_json("/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.body == {"status_message": "not found"}
        assert exc_info.value.is_not_found
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_text_error_body_is_kept(self, client: ProviderClient):
        respx.get(f"{BASE_URL}/broken").mock(
            return_value=httpx.Response(502, text="Bad Gateway")
        )

        with pytest.raises(ProviderError) as exc_info:
            await client.get_json("/broken")

        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "Bad Gateway"
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_failure(self, client: ProviderClient):
        respx.get(f"{BASE_URL}/items").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ProviderError) as exc_info:
            await client.get_json("/items")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body(self, client: ProviderClient):
        respx.get(f"{BASE_URL}/items").mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(ProviderError):
            await client.get_json("/items")
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_redirect_without_location_raises(self, client: ProviderClient):
        respx.get(f"{BASE_URL}/moved").mock(return_value=httpx.Response(302, json={"ok": True}))

        with pytest.raises(ProviderError) as exc_info:
            await client.get_json("/moved")

        assert exc_info.value.status_code == 302
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_modified_is_not_success(self, client: ProviderClient):
        respx.get(f"{BASE_URL}/items").mock(return_value=httpx.Response(304))

        with pytest.raises(ProviderError) as exc_info:
            await client.get_json("/items")

        assert exc_info.value.status_code == 304
        await client.close()


class TestGetBytes:
    """Tests for ProviderClient.get_bytes()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_absolute_url(self, client: ProviderClient):
        respx.get("https://files.example.test/a.gz").mock(
            return_value=httpx.Response(200, content=b"\x1f\x8bdata")
        )

        assert await client.get_bytes("https://files.example.test/a.gz", timeout=30.0) == b"\x1f\x8bdata"
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_follows_redirect_to_cdn(self, client: ProviderClient):
        respx.get("https://files.example.test/a.gz").mock(
            return_value=httpx.Response(
                302, headers={"Location": "https://cdn.example.test/a.gz"}
            )
        )
        cdn = respx.get("https://cdn.example.test/a.gz").mock(
            return_value=httpx.Response(200, content=b"subtitle")
        )

        assert await client.get_bytes("https://files.example.test/a.gz") == b"subtitle"
        assert cdn.called
        await client.close()


class TestClose:
    @pytest.mark.asyncio
    async def test_close_without_requests(self, client: ProviderClient):
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_client_is_recreated_after_close(self, client: ProviderClient):
        respx.get(f"{BASE_URL}/items").mock(return_value=httpx.Response(200, json=[]))

        await client.get_json("/items")
        await client.close()

        assert await client.get_json("/items") == []
        await client.close()
