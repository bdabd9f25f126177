"""Engine subpackage - core pricing logic and variant selection."""
from .pricing_engine import PricingEngine, compute_price, price_tiers
from .models import PriceResult, PriceTier, PricingError, QuoteOutcome, OutcomeKind
from .units import normalize_length
from .variant_selector import (
    FixedVariantSelector, RoundRobinSelector, VariantSelector, EmptyPoolError, build_selector,
)

__all__ = [
    'PricingEngine', 'compute_price', 'price_tiers',
    'PriceResult', 'PriceTier', 'PricingError', 'QuoteOutcome', 'OutcomeKind',
    'normalize_length',
    'FixedVariantSelector', 'RoundRobinSelector', 'VariantSelector', 'EmptyPoolError', 'build_selector',
]
