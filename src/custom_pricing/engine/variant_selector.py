"""
Variant Selector - picks the Shopify variant whose price gets overwritten.

Two policies exist. The fixed policy always returns one configured id and is
the default. The round-robin policy cycles over a pool so concurrent
customers are less likely to race on the same variant.
"""
import logging
from typing import Optional, Protocol, Sequence, runtime_checkable

from ..config.settings import Settings

logger = logging.getLogger(__name__)


class EmptyPoolError(RuntimeError):
    """Raised when a selector has no variant id to hand out."""


@runtime_checkable
class VariantSelector(Protocol):
    """What the request pipeline needs from a selection policy."""

    policy: str

    def next_variant_id(self) -> str:
        ...

    def describe(self) -> dict:
        ...


class FixedVariantSelector:
    """Always returns the same variant id."""

    policy = 'fixed'

    def __init__(self, variant_id: Optional[str]):
        self.variant_id = variant_id

    def next_variant_id(self) -> str:
        if not self.variant_id:
            raise EmptyPoolError("No variant ID configured")
        return self.variant_id

    def describe(self) -> dict:
        return {"policy": self.policy, "variants": 1 if self.variant_id else 0}


class RoundRobinSelector:
    """
    Cycles through an ordered pool of variant ids.

    The cursor is plain instance state. Overlapping requests may receive the
    same or a skipped index; that is accepted.
    """

    policy = 'round_robin'

    def __init__(self, pool: Sequence[str], start: int = 0):
        self.pool = tuple(pool)
        self.cursor = start

    def next_variant_id(self) -> str:
        if not self.pool:
            raise EmptyPoolError("No variant IDs in pool")
        variant_id = self.pool[self.cursor % len(self.pool)]
        self.cursor += 1
        return variant_id

    def describe(self) -> dict:
        return {"policy": self.policy, "variants": len(self.pool), "cursor": self.cursor}


def build_selector(settings: Settings) -> VariantSelector:
    """Create the selector configured by `settings.variant_policy`."""
    if settings.variant_policy == 'round_robin':
        if not settings.variant_pool:
            logger.warning("Round-robin policy selected but CUSTOM_VARIANT_IDS is empty")
        return RoundRobinSelector(settings.variant_pool)

    if not settings.variant_id:
        logger.warning("Fixed variant policy selected but CUSTOM_VARIANT_ID is not set")
    return FixedVariantSelector(settings.variant_id)
