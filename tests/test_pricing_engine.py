"""
Pricing engine regression tests.
These capture the tier table exactly and should fail if any band or
boundary changes unexpectedly.
"""
import math
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from custom_pricing.engine import PricingEngine, PricingError, compute_price, price_tiers
from custom_pricing.engine.pricing_engine import TIER_TABLE, format_price


@pytest.fixture(scope="module")
def engine():
    """Create a single engine instance for all tests."""
    return PricingEngine()


TIER_CASES = [
    # (length, expected price)
    (5.5, 534.99),
    (6.0, 534.99),
    (7.0, 534.99),
    (7.0001, 579.99),
    (8.0, 579.99),
    (8.0001, 669.99),
    (9.0, 669.99),
    (10.0, 669.99),
    (10.0001, 759.99),
    (11.0, 759.99),
    (11.5, 809.99),
    (12.0, 809.99),
    (12.5, 859.99),
    (13.0, 859.99),
    (13.5, 909.99),
    (14.0, 909.99),
    (14.0001, 959.99),
    (15.0, 959.99),
]


@pytest.mark.parametrize("length,expected", TIER_CASES, ids=lambda v: str(v))
def test_tier_prices(engine, length, expected):
    """Each length lands in the documented band with the exact price."""
    result = engine.compute_price(length)
    assert result.ok, f"Length {length} should be priced, got {result.error}"
    assert result.price == expected, \
        f"Price mismatch for {length} m: expected ${expected:.2f}, got ${result.price:.2f}"


def test_flat_tier_is_not_base_relative(engine):
    """The (8, 10] band is a literal 669.99, not base + offset."""
    result = engine.compute_price(9)
    assert result.price == 669.99
    assert result.tier.label == "(8, 10]"


@pytest.mark.parametrize("length", [0, -1, -0.001, math.nan, None, "abc", "", [], {}])
def test_invalid_length(engine, length):
    """Non-numeric or non-positive lengths are invalid."""
    result = engine.compute_price(length)
    assert not result.ok
    assert result.error is PricingError.INVALID_LENGTH
    assert result.error.value == "Invalid length"
    assert result.price is None


@pytest.mark.parametrize("length", [0.5, 5.49999, 15.00001, 20, math.inf])
def test_out_of_supported_range(engine, length):
    """Positive lengths outside [5.5, 15] are rejected before tier lookup."""
    result = engine.compute_price(length)
    assert not result.ok
    assert result.error is PricingError.OUT_OF_SUPPORTED_RANGE
    assert result.error.value == "Out of supported range"


def test_numeric_strings_are_accepted(engine):
    """Storefront forms may send numbers as strings."""
    assert engine.compute_price("9").price == 669.99


def test_every_length_matches_exactly_one_tier():
    """Tiers are contiguous and non-overlapping across [5.5, 15]."""
    from decimal import Decimal

    for mm in range(5500, 15001, 7):
        length = Decimal(mm) / 1000
        matches = [t for t in TIER_TABLE if t.contains(length)]
        assert len(matches) == 1, f"{length} m matched {len(matches)} tiers"


def test_tier_table_is_contiguous():
    """Each band starts where the previous one ends."""
    assert TIER_TABLE[0].lower_inclusive
    for prev, tier in zip(TIER_TABLE, TIER_TABLE[1:]):
        assert tier.lower == prev.upper
        assert not tier.lower_inclusive


def test_gap_in_custom_table_reports_no_tier():
    """A table with a hole yields the defensive no-tier error."""
    engine = PricingEngine(tiers=TIER_TABLE[:2] + TIER_TABLE[3:])
    result = engine.compute_price(9)
    assert not result.ok
    assert result.error is PricingError.NO_PRICE_TIER_FOUND


def test_trace_records_resolution(engine):
    """The trace shows input and matched tier."""
    result = engine.compute_price(12.2)
    text = result.get_trace_text()
    assert "Requested length" in text
    assert "(12, 13]" in text
    assert "$859.99" in text


def test_module_level_helpers():
    """compute_price and price_tiers use the default table."""
    assert compute_price(6).price == 534.99
    tiers = price_tiers()
    assert len(tiers) == 8
    assert tiers[0] == {
        "range": "[5.5, 7]",
        "min_m": 5.5,
        "max_m": 7.0,
        "min_inclusive": True,
        "price": 534.99,
    }
    assert [t["price"] for t in tiers] == [
        534.99, 579.99, 669.99, 759.99, 809.99, 859.99, 909.99, 959.99
    ]


@pytest.mark.parametrize("price,expected", [
    (669.99, "669.99"),
    (579.99, "579.99"),
    (10, "10.00"),
    (1.005, "1.01"),
    (2.675, "2.68"),
])
def test_format_price_half_up(price, expected):
    """Admin API prices are fixed two-decimal strings, rounded half-up."""
    assert format_price(price) == expected
