"""
Cielo Feed API Provider

Fetches a wallet's transaction feed from Cielo. The request is serialized by
``build_feed_url`` and sent as a single GET; the body is handed back
unparsed together with the HTTP status.

Docs: https://developer.cielo.finance/reference/getfeed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .base import Provider
from ..config import settings
from ..errors import CieloApiError, CieloConfigError
from ..services.feed_query import build_feed_url
from ..types import FeedRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedResponse:
    """Raw feed response. ``text`` is returned whatever the status."""
    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> "FeedResponse":
        if not self.ok:
            raise CieloApiError(
                f"Cielo feed request failed with HTTP {self.status_code}",
                status_code=self.status_code,
                body=self.text,
            )
        return self


class CieloProvider(Provider):
    """Cielo feed API provider."""

    name = "cielo"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ):
        self.api_key = api_key or settings.cielo_api_key
        self.base_url = base_url or settings.cielo_base_url
        self.timeout_s = timeout_s or settings.request_timeout_seconds
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "CieloProvider":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout_s)
        return self._client

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "X-API-KEY": self.api_key,
        }

    async def ready(self) -> bool:
        return bool(self.api_key)

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "unavailable", "reason": "Cielo API key not configured"}
        return {"status": "configured", "base_url": self.base_url}

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def build_url(self, request: FeedRequest) -> str:
        return build_feed_url(request, base_url=self.base_url)

    async def get_feed(self, request: FeedRequest) -> FeedResponse:
        """
        Fetch the feed for ``request``.

        Args:
            request: Feed filters; ``wallet`` must be set

        Returns:
            FeedResponse with the URL called, HTTP status and body text

        Raises:
            MissingRequiredField: wallet not set (no request is sent)
            CieloConfigError: no API key configured
            httpx.HTTPError: transport failure
        """
        url = self.build_url(request)
        if not await self.ready():
            raise CieloConfigError("Cielo API key is not configured")

        client = await self._get_client()
        try:
            response = await client.get(url, headers=self._build_headers())
        except httpx.HTTPError as e:
            logger.error(f"Cielo feed request failed: {e}")
            raise

        if response.is_success:
            logger.debug(f"Cielo feed HTTP {response.status_code} for {request.wallet}")
        else:
            logger.warning(f"Cielo feed returned HTTP {response.status_code} for {request.wallet}")

        return FeedResponse(url=url, status_code=response.status_code, text=response.text)

    async def get_feed_text(self, request: FeedRequest) -> str:
        """Fetch the feed and return only the body text."""
        response = await self.get_feed(request)
        return response.text


# Singleton instance
_provider_instance: Optional[CieloProvider] = None


def get_cielo_provider() -> CieloProvider:
    """Get the singleton Cielo provider instance."""
    global _provider_instance
    if _provider_instance is None:
        _provider_instance = CieloProvider()
    return _provider_instance
