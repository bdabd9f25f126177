"""
Pricing Engine - tiered price resolution for custom lengths.

Lengths are priced against a static table of eight contiguous bands between
5.5 m and 15 m. Most bands are expressed as an offset from the base price;
the (8, 10] band is a flat literal and must stay that way.
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from .models import PriceResult, PriceTier, PricingError
from .units import to_number

BASE_PRICE = Decimal('579.99')
MIN_LENGTH_M = Decimal('5.5')
MAX_LENGTH_M = Decimal('15')
CENT = Decimal('0.01')

TIER_TABLE = (
    PriceTier(Decimal('5.5'), Decimal('7'), BASE_PRICE - 45, lower_inclusive=True),
    PriceTier(Decimal('7'), Decimal('8'), BASE_PRICE),
    PriceTier(Decimal('8'), Decimal('10'), Decimal('669.99')),
    PriceTier(Decimal('10'), Decimal('11'), BASE_PRICE + 180),
    PriceTier(Decimal('11'), Decimal('12'), BASE_PRICE + 230),
    PriceTier(Decimal('12'), Decimal('13'), BASE_PRICE + 280),
    PriceTier(Decimal('13'), Decimal('14'), BASE_PRICE + 330),
    PriceTier(Decimal('14'), Decimal('15'), BASE_PRICE + 380),
)


def round_price(value: Decimal) -> Decimal:
    """Standard half-up currency rounding to cents."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_price(price: float) -> str:
    """Fixed two-decimal string, as the Admin API expects."""
    return str(round_price(Decimal(str(price))))


class PricingEngine:
    """
    Resolves a price for a length in meters.

    Resolution order:
    1. Reject non-numeric or non-positive lengths (Invalid length)
    2. Reject lengths outside [5.5, 15] (Out of supported range)
    3. Find the single tier whose band contains the length
    4. Round the tier price half-up to cents
    """

    def __init__(self, tiers: tuple = TIER_TABLE):
        self.tiers = tuple(tiers)
        self.min_length = MIN_LENGTH_M
        self.max_length = MAX_LENGTH_M

    def tier_for(self, length_m: float) -> Optional[PriceTier]:
        """Return the tier containing `length_m`, or None."""
        exact = Decimal(length_m)
        for tier in self.tiers:
            if tier.contains(exact):
                return tier
        return None

    def price_tiers(self) -> list[dict]:
        """The tier table as plain dicts, in ascending length order."""
        return [tier.to_dict() for tier in self.tiers]

    def compute_price(self, length_m: Any) -> PriceResult:
        """
        Price a single length.

        Args:
            length_m: Length in meters; anything non-numeric is invalid.

        Returns:
            PriceResult with either `price` or `error` set.
        """
        value = to_number(length_m)

        result = PriceResult(ok=False, length_m=value)
        result.add_trace("Input", "Requested length (m)", str(value))

        if math.isnan(value) or value <= 0:
            result.error = PricingError.INVALID_LENGTH
            result.add_trace("Validation", "Length is not a positive number")
            return result

        if value < self.min_length or value > self.max_length:
            result.error = PricingError.OUT_OF_SUPPORTED_RANGE
            result.add_trace(
                "Validation",
                f"Length outside supported range [{self.min_length}, {self.max_length}]",
            )
            return result

        tier = self.tier_for(value)
        if tier is None:
            result.error = PricingError.NO_PRICE_TIER_FOUND
            result.add_trace("Tier Lookup", "No tier contains this length")
            return result

        price = round_price(tier.price)
        result.ok = True
        result.tier = tier
        result.price = float(price)
        result.add_trace("Tier Lookup", f"Matched tier {tier.label}", f"${price}")
        return result


_default_engine = PricingEngine()


def compute_price(length_m: Any) -> PriceResult:
    """Price a length with the default tier table."""
    return _default_engine.compute_price(length_m)


def price_tiers() -> list[dict]:
    """The default tier table for display."""
    return _default_engine.price_tiers()
