"""
Custom Price API - FastAPI router for length-based pricing.
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..engine.models import OutcomeKind, QuoteOutcome
from ..services.quote_service import QuoteService
from .state import AppState, get_quote_service, get_state

router = APIRouter(prefix="/api", tags=["custom-price"])

STATUS_BY_KIND = {
    OutcomeKind.SUCCESS: 200,
    OutcomeKind.INVALID_INPUT: 400,
    OutcomeKind.UPSTREAM_FAILURE: 502,
    OutcomeKind.INTERNAL_ERROR: 500,
}


# Pydantic models for API
class CustomPriceRequest(BaseModel):
    """Either `length_m` or at least one of `feet` / `inches`."""
    length_m: Optional[Any] = None
    feet: Optional[Any] = None
    inches: Optional[Any] = None


class CustomPriceResponse(BaseModel):
    variantId: str
    price: float
    length_m: float


class PreviewResponse(BaseModel):
    price: float
    length_m: float


class PriceTierResponse(BaseModel):
    range: str
    min_m: float
    max_m: float
    min_inclusive: bool
    price: float


def to_response(outcome: QuoteOutcome) -> JSONResponse:
    """Single place where outcome kinds become HTTP statuses."""
    payload = outcome.to_payload()
    if outcome.kind is OutcomeKind.SUCCESS and outcome.variant_id is None:
        payload.pop("variantId", None)
    return JSONResponse(status_code=STATUS_BY_KIND[outcome.kind], content=payload)


# Endpoints

@router.post(
    "/custom-price",
    response_model=CustomPriceResponse,
    responses={400: {}, 500: {}, 502: {}},
)
async def custom_price(
    payload: Optional[CustomPriceRequest] = Body(default=None),
    quotes: QuoteService = Depends(get_quote_service),
):
    """Price a custom length and write it to the selected Shopify variant."""
    body = payload.model_dump() if payload else {}
    outcome = await quotes.submit(body)
    return to_response(outcome)


@router.post("/custom-price/preview", response_model=PreviewResponse, responses={400: {}})
async def preview_custom_price(
    payload: Optional[CustomPriceRequest] = Body(default=None),
    quotes: QuoteService = Depends(get_quote_service),
):
    """Price a custom length without updating Shopify."""
    body = payload.model_dump() if payload else {}
    return to_response(quotes.preview(body))


@router.get("/price-tiers", response_model=list[PriceTierResponse])
async def list_price_tiers(state: AppState = Depends(get_state)):
    """List the length tiers and their prices."""
    return state.engine.price_tiers()
