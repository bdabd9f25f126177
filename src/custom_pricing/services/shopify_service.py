"""
Shopify Variant Client - writes a variant price through the Admin REST API.

One PUT per call, no retries. A non-2xx answer is surfaced as
UpstreamFailure carrying the response body untouched.
"""
import logging
from typing import Optional

import httpx

from ..config.settings import Settings
from ..engine.pricing_engine import format_price

logger = logging.getLogger(__name__)


class UpstreamFailure(Exception):
    """The Admin API answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Shopify responded with HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class ShopifyVariantClient:
    """
    Thin async wrapper around the variants endpoint.

    The underlying httpx.AsyncClient is created lazily unless one is injected
    (tests pass a client backed by httpx.MockTransport).
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.upstream_timeout)
        return self._client

    def variant_url(self, variant_id: str) -> str:
        return f"{self.settings.variant_endpoint_base}/{variant_id}.json"

    async def update_price(self, variant_id: str, price: float) -> None:
        """
        Overwrite the price of `variant_id`.

        Raises:
            UpstreamFailure: Shopify returned a non-2xx status.
            httpx.HTTPError: transport-level failure (timeout, DNS, ...).
        """
        client = await self._get_client()
        new_price = format_price(price)

        response = await client.put(
            self.variant_url(variant_id),
            json={"variant": {"id": variant_id, "price": new_price}},
            headers={
                "Content-Type": "application/json",
                "X-Shopify-Access-Token": self.settings.admin_token,
            },
        )

        if not response.is_success:
            logger.warning(
                f"Shopify update for variant {variant_id} failed with status {response.status_code}"
            )
            raise UpstreamFailure(response.status_code, response.text)

        logger.info(f"Variant {variant_id} price set to {new_price}")

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
