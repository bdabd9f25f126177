"""
Data models for the pricing engine and request pipeline.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class PricingError(str, Enum):
    """Validation failures returned by the pricing engine."""
    INVALID_LENGTH = "Invalid length"
    OUT_OF_SUPPORTED_RANGE = "Out of supported range"
    NO_PRICE_TIER_FOUND = "No price tier found"


@dataclass
class TraceStep:
    """A single step in the pricing resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class PriceTier:
    """A length band (meters) mapped to a fixed price."""
    lower: Decimal
    upper: Decimal
    price: Decimal
    lower_inclusive: bool = False

    def contains(self, length_m: Decimal) -> bool:
        above = length_m >= self.lower if self.lower_inclusive else length_m > self.lower
        return above and length_m <= self.upper

    @property
    def label(self) -> str:
        left = '[' if self.lower_inclusive else '('
        return f"{left}{self.lower}, {self.upper}]"

    def to_dict(self) -> dict:
        return {
            "range": self.label,
            "min_m": float(self.lower),
            "max_m": float(self.upper),
            "min_inclusive": self.lower_inclusive,
            "price": float(self.price),
        }


@dataclass
class PriceResult:
    """Outcome of pricing a single length."""
    ok: bool
    length_m: float
    price: Optional[float] = None
    error: Optional[PricingError] = None
    tier: Optional[PriceTier] = None
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this result."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


class OutcomeKind(str, Enum):
    """Terminal states of the custom price pipeline."""
    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    UPSTREAM_FAILURE = "upstream_failure"
    INTERNAL_ERROR = "internal_error"


@dataclass
class QuoteOutcome:
    """
    Tagged result of one custom price request.

    The HTTP layer is the only place that turns a kind into a status code.
    """
    kind: OutcomeKind
    variant_id: Optional[str] = None
    price: Optional[float] = None
    length_m: Optional[float] = None
    error: Optional[str] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    def to_payload(self) -> dict[str, Any]:
        """Wire payload for this outcome (without the status code)."""
        if self.kind is OutcomeKind.SUCCESS:
            return {
                "variantId": self.variant_id,
                "price": self.price,
                "length_m": self.length_m,
            }
        if self.kind is OutcomeKind.UPSTREAM_FAILURE:
            return {"error": self.error, "detail": self.detail}
        return {"error": self.error}
