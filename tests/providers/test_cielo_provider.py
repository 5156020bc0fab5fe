import httpx
import pytest

from cielo.config import settings
from cielo.errors import CieloApiError, CieloConfigError, MissingRequiredField
from cielo.providers.cielo import CieloProvider, FeedResponse
from cielo.types import Chain, FeedRequest, TxType


class _DummyResponse:
    def __init__(self, status_code=200, text='{"status":"ok","data":{"items":[]}}'):
        self.status_code = status_code
        self.text = text

    @property
    def is_success(self):
        return 200 <= self.status_code < 300


class _DummyClient:
    def __init__(self, response=None, error=None):
        self.response = response or _DummyResponse()
        self.error = error
        self.requests = []
        self.is_closed = False

    async def get(self, url, headers=None):
        self.requests.append({"url": url, "headers": headers})
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self):
        self.is_closed = True


def _provider(client, api_key="test-key"):
    provider = CieloProvider(api_key=api_key)
    provider._client = client
    return provider


class TestGetFeed:

    @pytest.mark.asyncio
    async def test_sends_url_and_headers(self):
        client = _DummyClient()
        provider = _provider(client)
        request = FeedRequest(
            wallet="0x0f9d76acdbc4417b026f876be1e2042e45f3bcd2",
            limit=10,
            chains=[Chain.ETHEREUM],
            tx_types=[TxType.SWAP],
            min_usd=100,
        )

        response = await provider.get_feed(request)

        sent = client.requests[0]
        assert sent["url"] == (
            "https://feed-api.cielo.finance/api/v1/feed?"
            "wallet=0x0f9d76acdbc4417b026f876be1e2042e45f3bcd2"
            "&limit=10&chains=ethereum&txTypes=swap&minUSD=100"
        )
        assert sent["headers"] == {"Accept": "application/json", "X-API-KEY": "test-key"}
        assert response.status_code == 200
        assert response.url == sent["url"]
        assert response.ok

    @pytest.mark.asyncio
    async def test_body_returned_regardless_of_status(self):
        client = _DummyClient(_DummyResponse(status_code=401, text='{"status":"error"}'))
        provider = _provider(client)

        response = await provider.get_feed(FeedRequest(wallet="w"))

        assert response.text == '{"status":"error"}'
        assert response.status_code == 401
        assert not response.ok

    @pytest.mark.asyncio
    async def test_get_feed_text(self):
        client = _DummyClient(_DummyResponse(text="body"))
        provider = _provider(client)

        assert await provider.get_feed_text(FeedRequest(wallet="w")) == "body"

    @pytest.mark.asyncio
    async def test_missing_wallet_sends_nothing(self):
        client = _DummyClient()
        provider = _provider(client)

        with pytest.raises(MissingRequiredField):
            await provider.get_feed(FeedRequest(limit=1))

        assert client.requests == []

    @pytest.mark.asyncio
    async def test_missing_api_key_sends_nothing(self, monkeypatch):
        monkeypatch.setattr(settings, "cielo_api_key", "")
        client = _DummyClient()
        provider = _provider(client, api_key=None)

        with pytest.raises(CieloConfigError):
            await provider.get_feed(FeedRequest(wallet="w"))

        assert client.requests == []

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        error = httpx.ConnectError("connection refused")
        provider = _provider(_DummyClient(error=error))

        with pytest.raises(httpx.ConnectError):
            await provider.get_feed(FeedRequest(wallet="w"))

    @pytest.mark.asyncio
    async def test_custom_base_url(self):
        client = _DummyClient()
        provider = CieloProvider(api_key="k", base_url="http://localhost:9000/feed?")
        provider._client = client

        await provider.get_feed(FeedRequest(wallet="w"))

        assert client.requests[0]["url"] == "http://localhost:9000/feed?wallet=w"


class TestLifecycle:

    def test_timeout_defaults_to_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "request_timeout_seconds", 12)

        assert CieloProvider(api_key="k").timeout_s == 12
        assert CieloProvider(api_key="k", timeout_s=5).timeout_s == 5

    @pytest.mark.asyncio
    async def test_client_uses_timeout(self):
        provider = CieloProvider(api_key="k", timeout_s=7)

        client = await provider._get_client()
        try:
            assert client.timeout == httpx.Timeout(7)
        finally:
            await provider.close()

    @pytest.mark.asyncio
    async def test_close_releases_client(self):
        client = _DummyClient()
        provider = _provider(client)

        await provider.close()

        assert client.is_closed
        assert provider._client is None

    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        client = _DummyClient()
        async with _provider(client) as provider:
            await provider.get_feed(FeedRequest(wallet="w"))

        assert client.is_closed

    @pytest.mark.asyncio
    async def test_ready_and_health(self):
        provider = CieloProvider(api_key="k")

        assert await provider.ready()
        assert (await provider.health_check())["status"] == "configured"

    @pytest.mark.asyncio
    async def test_health_without_key(self, monkeypatch):
        monkeypatch.setattr(settings, "cielo_api_key", "")
        provider = CieloProvider()

        assert not await provider.ready()
        assert (await provider.health_check())["status"] == "unavailable"


class TestFeedResponse:

    def test_raise_for_status_success(self):
        response = FeedResponse(url="u", status_code=200, text="{}")

        assert response.raise_for_status() is response

    def test_raise_for_status_error(self):
        response = FeedResponse(url="u", status_code=429, text="slow down")

        with pytest.raises(CieloApiError) as exc_info:
            response.raise_for_status()

        assert exc_info.value.status_code == 429
        assert exc_info.value.body == "slow down"
