"""Precise unit tests for HTTPClient.

Tests focus on session management, URL handling and error mapping.
"""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from aiohttp import test_utils, web

from topgg.servers.core import NetworkError, ParseError
from topgg.servers.runtime.rest import HTTPClient


def _mock_response(payload=None, *, json_side_effect=None, raise_side_effect=None):
    response = AsyncMock()
    response.status = 200
    response.json = AsyncMock(return_value=payload, side_effect=json_side_effect)
    response.raise_for_status = MagicMock(side_effect=raise_side_effect)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def _client_with(response=None, *, get_side_effect=None) -> HTTPClient:
    client = HTTPClient()
    session = MagicMock()
    session.closed = False  # session property checks this
    session.get = MagicMock(return_value=response, side_effect=get_side_effect)
    client._session = session
    return client


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_init_without_timeout(self):
        """Test requests are unbounded by default."""
        client = HTTPClient()
        assert client.timeout.total is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientGet:
    """Test HTTPClient.get behavior."""

    @pytest.mark.asyncio
    async def test_get_returns_json(self):
        """Test get() returns the decoded body."""
        client = _client_with(_mock_response({"results": []}))

        result = await client.get("https://top.gg/api/client/entities/search?amount=1&skip=0")

        assert result == {"results": []}

    @pytest.mark.asyncio
    async def test_get_passes_url_string_to_session(self):
        """Test get() leaves quoting to aiohttp's default URL handling."""
        client = _client_with(_mock_response({}))
        url = "https://top.gg/api/client/entities/search?q=hello world&amount=1&skip=0"

        await client.get(url)

        client._session.get.assert_called_once_with(url)

    @pytest.mark.asyncio
    async def test_get_ignores_content_type(self):
        """Test the body is decoded regardless of the declared content type."""
        response = _mock_response({"results": []})
        client = _client_with(response)

        await client.get("https://top.gg/x")

        response.json.assert_awaited_once_with(content_type=None)

    @pytest.mark.asyncio
    async def test_get_http_status_error(self):
        """Test a non-2xx status raises NetworkError with the status code."""
        error = aiohttp.ClientResponseError(request_info=MagicMock(), history=(), status=503)
        client = _client_with(_mock_response(raise_side_effect=error))

        with pytest.raises(NetworkError) as exc_info:
            await client.get("https://top.gg/x")

        assert exc_info.value.status_code == 503
        assert exc_info.value.url == "https://top.gg/x"
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_get_connection_error(self):
        """Test transport failures raise NetworkError."""
        client = _client_with(get_side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(NetworkError, match="refused"):
            await client.get("https://top.gg/x")

    @pytest.mark.asyncio
    async def test_get_timeout(self):
        """Test timeouts raise NetworkError."""
        client = _client_with(get_side_effect=asyncio.TimeoutError())

        with pytest.raises(NetworkError) as exc_info:
            await client.get("https://top.gg/x")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_get_invalid_json(self):
        """Test an undecodable body raises ParseError."""
        bad = json.JSONDecodeError("Expecting value", "<html>", 0)
        client = _client_with(_mock_response(json_side_effect=bad))

        with pytest.raises(ParseError, match="not JSON"):
            await client.get("https://top.gg/x")


class TestHTTPClientLocalServer:
    """Test HTTPClient against a real aiohttp server on localhost."""

    @staticmethod
    def _echo_app() -> web.Application:
        async def search(request: web.Request) -> web.Response:
            return web.json_response({"query": dict(request.query)})

        app = web.Application()
        app.router.add_get("/api/client/entities/search", search)
        return app

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["minecraft server", "café"])
    async def test_unescaped_query_reaches_server(self, query):
        """Test spaces and non-ASCII text in a query are accepted by the server."""
        async with test_utils.TestServer(self._echo_app()) as server:
            url = f"{server.make_url('/api/client/entities/search')}?q={query}&amount=1&skip=0"
            async with HTTPClient() as client:
                body = await client.get(url)

        assert body["query"]["q"] == query
        assert body["query"]["amount"] == "1"
        assert body["query"]["skip"] == "0"

    @pytest.mark.asyncio
    async def test_existing_escapes_are_kept(self):
        """Test a pre-escaped value is not escaped a second time."""
        async with test_utils.TestServer(self._echo_app()) as server:
            url = f"{server.make_url('/api/client/entities/search')}?q=hello%20world"
            async with HTTPClient() as client:
                body = await client.get(url)

        assert body["query"]["q"] == "hello world"

    @pytest.mark.asyncio
    async def test_status_error_from_server(self):
        """Test a real 404 surfaces as NetworkError with the status code."""
        async with test_utils.TestServer(self._echo_app()) as server:
            url = str(server.make_url("/missing"))
            async with HTTPClient() as client:
                with pytest.raises(NetworkError) as exc_info:
                    await client.get(url)

        assert exc_info.value.status_code == 404
