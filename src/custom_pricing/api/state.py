"""
Per-application dependency context.

Built once in create_app() and stored on `app.state.pricing`, so handlers
never read globals or the environment directly.
"""
from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import Request

from ..config.settings import Settings
from ..engine.pricing_engine import PricingEngine
from ..engine.variant_selector import VariantSelector, build_selector
from ..services.quote_service import QuoteService
from ..services.shopify_service import ShopifyVariantClient


@dataclass
class AppState:
    settings: Settings
    engine: PricingEngine
    selector: VariantSelector
    shopify: ShopifyVariantClient
    quotes: QuoteService

    @classmethod
    def build(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> 'AppState':
        engine = PricingEngine()
        selector = build_selector(settings)
        shopify = ShopifyVariantClient(settings, http_client=http_client)
        return cls(
            settings=settings,
            engine=engine,
            selector=selector,
            shopify=shopify,
            quotes=QuoteService(engine, selector, shopify),
        )


def get_state(request: Request) -> AppState:
    return request.app.state.pricing


def get_quote_service(request: Request) -> QuoteService:
    return get_state(request).quotes
