"""
Quote Service - the custom price request pipeline.

Parse → Price → Select variant → Persist → Respond. Every path ends in a
QuoteOutcome; nothing here knows about HTTP status codes.
"""
import logging
from typing import Any, Mapping, Optional

from ..engine.models import OutcomeKind, PriceResult, QuoteOutcome
from ..engine.pricing_engine import PricingEngine
from ..engine.units import normalize_length, round_length
from ..engine.variant_selector import VariantSelector
from .shopify_service import ShopifyVariantClient, UpstreamFailure

logger = logging.getLogger(__name__)

UPSTREAM_ERROR = "Shopify update failed"
INTERNAL_ERROR = "Server error"


def _payload_fields(payload: Optional[Mapping[str, Any]]) -> tuple:
    if not isinstance(payload, Mapping):
        payload = {}
    return payload.get('length_m'), payload.get('feet'), payload.get('inches')


class QuoteService:
    """Runs one custom price request end to end."""

    def __init__(self, engine: PricingEngine, selector: VariantSelector, shopify: ShopifyVariantClient):
        self.engine = engine
        self.selector = selector
        self.shopify = shopify

    def price_payload(self, payload: Optional[Mapping[str, Any]]) -> PriceResult:
        """Normalize the payload to meters and price it."""
        length_m, feet, inches = _payload_fields(payload)
        meters = normalize_length(length_m, feet, inches)
        return self.engine.compute_price(meters)

    def preview(self, payload: Optional[Mapping[str, Any]]) -> QuoteOutcome:
        """Price a payload without touching Shopify."""
        try:
            result = self.price_payload(payload)
            if not result.ok:
                return QuoteOutcome(kind=OutcomeKind.INVALID_INPUT, error=result.error.value)
            return QuoteOutcome(
                kind=OutcomeKind.SUCCESS,
                price=result.price,
                length_m=round_length(result.length_m),
            )
        except Exception:
            logger.exception("Custom price preview failed")
            return QuoteOutcome(kind=OutcomeKind.INTERNAL_ERROR, error=INTERNAL_ERROR)

    async def submit(self, payload: Optional[Mapping[str, Any]]) -> QuoteOutcome:
        """
        Price the payload and push the price to the selected variant.

        Returns:
            QuoteOutcome tagged SUCCESS, INVALID_INPUT, UPSTREAM_FAILURE
            or INTERNAL_ERROR.
        """
        try:
            result = self.price_payload(payload)
            if not result.ok:
                logger.info(f"Rejected length {result.length_m}: {result.error.value}")
                return QuoteOutcome(kind=OutcomeKind.INVALID_INPUT, error=result.error.value)

            variant_id = self.selector.next_variant_id()

            try:
                await self.shopify.update_price(variant_id, result.price)
            except UpstreamFailure as e:
                return QuoteOutcome(
                    kind=OutcomeKind.UPSTREAM_FAILURE,
                    variant_id=variant_id,
                    error=UPSTREAM_ERROR,
                    detail=e.body,
                )

            return QuoteOutcome(
                kind=OutcomeKind.SUCCESS,
                variant_id=variant_id,
                price=result.price,
                length_m=round_length(result.length_m),
            )
        except Exception:
            logger.exception("Custom price request failed")
            return QuoteOutcome(kind=OutcomeKind.INTERNAL_ERROR, error=INTERNAL_ERROR)
