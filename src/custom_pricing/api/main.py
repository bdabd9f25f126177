"""
FastAPI application factory for the custom price API.

Run with:
    uvicorn --factory custom_pricing.api.main:create_app --port 3000
    # or: custom-price-api
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from .. import __version__
from ..config.settings import Settings, get_settings
from ..engine.models import PricingError
from ..utils.logger import setup_logging
from .cors import OriginPolicy, install_origin_gate
from .price_api import router as price_router
from .state import AppState

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """Build the app with its dependency context."""
    settings = settings or get_settings()
    # uvicorn --factory only configures uvicorn's own loggers
    setup_logging(settings.log_level)
    state = AppState.build(settings, http_client=http_client)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        logger.info(
            f"Custom price API ready (shop={settings.shop or 'unset'}, "
            f"variant policy={state.selector.policy})"
        )
        yield
        await state.shopify.aclose()

    application = FastAPI(
        title="Custom Price API",
        description="Tiered pricing for custom-length products, synced to Shopify",
        version=__version__,
        lifespan=lifespan,
    )
    application.state.pricing = state

    install_origin_gate(application, OriginPolicy(settings.origin_patterns, strict=settings.cors_strict))

    @application.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        # Malformed JSON or a non-object body carries no usable length
        logger.info(f"Unreadable body on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": PricingError.INVALID_LENGTH.value})

    application.include_router(price_router)

    @application.get("/", response_class=PlainTextResponse)
    async def root():
        return "Custom price API is running!"

    @application.get("/system/status")
    async def get_status():
        return {
            "engine_active": True,
            "version": __version__,
            "tiers_count": len(state.engine.tiers),
            "shop_configured": bool(settings.shop),
            "token_configured": bool(settings.admin_token),
            "selector": state.selector.describe(),
            "cors_strict": settings.cors_strict,
        }

    return application


def run() -> None:
    """Console entry point: start uvicorn on the configured port."""
    settings = get_settings()
    app = create_app(settings)
    logger.info(f"Custom price API listening on :{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
