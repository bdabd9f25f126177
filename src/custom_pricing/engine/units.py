"""Length normalization for metric and imperial storefront input."""
import math
import re
from typing import Any

METERS_PER_FOOT = 0.3048
METERS_PER_INCH = 0.0254

# Plain decimal notation only: no underscores, no "nan"/"inf" words
DECIMAL_RE = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$')


def to_number(value: Any) -> float:
    """
    Coerce a payload value to float, NaN when it is not numeric.

    Accepts ints, floats and plain decimal strings. Integers too large for
    a float become signed infinity so they fail the range check.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, str) and DECIMAL_RE.match(value):
        return float(value)
    return math.nan


def feet_inches_to_meters(feet: Any = None, inches: Any = None) -> float:
    """Convert a feet/inches pair to meters; missing parts count as zero."""
    f = to_number(feet)
    i = to_number(inches)
    f = 0.0 if math.isnan(f) else f
    i = 0.0 if math.isnan(i) else i
    return f * METERS_PER_FOOT + i * METERS_PER_INCH


def normalize_length(length_m: Any = None, feet: Any = None, inches: Any = None) -> float:
    """
    Resolve the requested length in meters.

    A direct `length_m` wins when it is a non-zero number. Otherwise the
    imperial pair is used if either part was sent. Anything else yields NaN,
    which the pricing engine rejects as an invalid length.
    """
    meters = to_number(length_m)
    if (math.isnan(meters) or meters == 0) and (feet is not None or inches is not None):
        meters = feet_inches_to_meters(feet, inches)
    return meters


def round_length(meters: float) -> float:
    """Round a length to millimetre precision for responses."""
    return round(meters, 3)
