"""Tests for winning/core/http.py - HTTP client factory."""

import anyio
import httpx
import pytest

from winning.core import http as http_module


async def _close_and_reset_scan_client_async() -> None:
    if http_module._scan_client is not None:
        await http_module._scan_client.aclose()
    http_module._scan_client = None


def _close_and_reset_scan_client() -> None:
    """Close and reset the scan client singleton (for test cleanup)."""
    anyio.run(_close_and_reset_scan_client_async)


class TestCreateHttpClient:
    @pytest.mark.asyncio
    async def test_default_timeouts(self):
        client = http_module.create_http_client(base_url="https://example.com")
        try:
            timeout = client.timeout

            assert timeout.connect == http_module.DEFAULT_CONNECT_TIMEOUT
            assert timeout.read == http_module.DEFAULT_READ_TIMEOUT
            assert timeout.write == http_module.DEFAULT_WRITE_TIMEOUT
            assert timeout.pool == http_module.DEFAULT_POOL_TIMEOUT
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_custom_base_url(self):
        client = http_module.create_http_client(base_url="https://api.example.com")
        try:
            assert client.base_url == httpx.URL("https://api.example.com")
        finally:
            await client.aclose()


class TestScanClient:
    @pytest.fixture(autouse=True)
    def reset_scan_client(self):
        _close_and_reset_scan_client()
        yield
        _close_and_reset_scan_client()

    @pytest.mark.asyncio
    async def test_is_singleton(self):
        assert http_module.get_scan_client() is http_module.get_scan_client()

    @pytest.mark.asyncio
    async def test_has_long_read_timeout_and_no_base_url(self):
        client = http_module.get_scan_client()

        assert client.timeout.read == http_module.SCAN_READ_TIMEOUT
        assert client.base_url == httpx.URL("")

    @pytest.mark.asyncio
    async def test_close_resets_singleton(self):
        client = http_module.get_scan_client()

        await http_module.close_scan_client()

        assert client.is_closed
        assert http_module._scan_client is None

    @pytest.mark.asyncio
    async def test_close_is_safe_without_client(self):
        await http_module.close_scan_client()

        assert http_module._scan_client is None
