"""
Tests for the FastAPI surface, with the transport swapped for InmemClient.
"""
import pytest
from httpx import ASGITransport, AsyncClient

from gmo_coin.api.main import app, get_http_client
from gmo_coin.core.entities.raw_response import RawResponse
from gmo_coin.core.errors import TransportError
from gmo_coin.core.interfaces.http_client import IHttpClient
from gmo_coin.infrastructure.gateways.local_mock import InmemClient


@pytest.fixture
async def make_client():
    """Yields a factory building an API client backed by the given transport."""
    clients = []

    async def _make(transport: IHttpClient) -> AsyncClient:
        app.dependency_overrides[get_http_client] = lambda: transport
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health(make_client):
    client = await make_client(InmemClient(200, "{}"))
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_trades_endpoint_returns_decoded_envelope(make_client, trades_body):
    client = await make_client(InmemClient(200, trades_body))

    resp = await client.get("/v1/trades?symbol=BTC&page=1&count=30")
    assert resp.status_code == 200

    data = resp.json()
    assert data["httpStatusCode"] == 200
    assert data["status"] == 0
    assert data["responsetime"] == "2019-03-28T09:28:07.980Z"
    assert data["data"]["pagination"] == {"currentPage": 1, "count": 30}
    assert len(data["data"]["list"]) == 2
    assert data["data"]["list"][0] == {
        "price": 750760,
        "side": "BUY",
        "size": 0.1,
        "timestamp": "2018-03-30T12:34:56.789Z",
    }


@pytest.mark.asyncio
async def test_trades_endpoint_decode_failure_is_bad_gateway(make_client):
    client = await make_client(InmemClient(200, "<html>maintenance</html>"))

    resp = await client.get("/v1/trades?symbol=BTC")
    assert resp.status_code == 502
    assert "decoded" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_trades_endpoint_opaque_failure(make_client, trades_body):
    client = await make_client(InmemClient(200, trades_body, return_error=True))

    resp = await client.get("/v1/trades?symbol=BTC")
    assert resp.status_code == 500


@pytest.mark.asyncio
async def test_trades_endpoint_unknown_symbol(make_client, ok_client):
    client = await make_client(ok_client)

    resp = await client.get("/v1/trades?symbol=DOGE")
    assert resp.status_code == 422


class _Unreachable(IHttpClient):
    async def get(self, url, headers=None) -> RawResponse:
        raise TransportError("connection refused", url=url)


@pytest.mark.asyncio
async def test_trades_endpoint_transport_failure_is_bad_gateway(make_client):
    client = await make_client(_Unreachable())

    resp = await client.get("/v1/trades?symbol=BTC")
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Upstream unreachable"


class _Recording(IHttpClient):
    def __init__(self):
        self.urls = []

    async def get(self, url, headers=None) -> RawResponse:
        self.urls.append(url)
        return RawResponse(status_code=200, body_text="{}")


class _Broken(IHttpClient):
    async def get(self, url, headers=None) -> RawResponse:
        raise ValueError("status code out of range")


@pytest.mark.asyncio
async def test_unknown_symbol_never_reaches_the_transport(make_client):
    transport = _Recording()
    client = await make_client(transport)

    resp = await client.get("/v1/trades?symbol=DOGE")
    assert resp.status_code == 422
    assert transport.urls == []


@pytest.mark.asyncio
async def test_value_errors_after_symbol_check_are_not_reported_as_unknown_symbol(make_client):
    client = await make_client(_Broken())

    with pytest.raises(ValueError, match="status code out of range"):
        await client.get("/v1/trades?symbol=BTC")
