"""Cache model for persisted prices."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from balance_sheet.core.exceptions import ValidationError
from balance_sheet.domain.models.enums import PriceKind

CacheKey = tuple[str, PriceKind, Optional[date]]


def current_key(instrument_id: str) -> CacheKey:
    """Cache key for an instrument's current price."""
    return (instrument_id, PriceKind.CURRENT, None)


def historical_key(instrument_id: str, on: date) -> CacheKey:
    """Cache key for an instrument's close on a given date."""
    return (instrument_id, PriceKind.HISTORICAL, on)


@dataclass(frozen=True)
class PriceCacheEntry:
    """
    A fetched price remembered by the price cache.

    HISTORICAL entries require `price_date` and never expire.
    CURRENT entries have no date and are replaced once stale.
    """

    instrument_id: str
    kind: PriceKind
    price_date: Optional[date]
    price: Decimal
    fetched_at: datetime

    def __post_init__(self) -> None:
        if self.kind == PriceKind.HISTORICAL and self.price_date is None:
            raise ValidationError(f"Historical price for {self.instrument_id} requires a date")
        if self.kind == PriceKind.CURRENT and self.price_date is not None:
            raise ValidationError(f"Current price for {self.instrument_id} must not carry a date")

    @property
    def key(self) -> CacheKey:
        if self.kind == PriceKind.CURRENT:
            return current_key(self.instrument_id)
        return historical_key(self.instrument_id, self.price_date)
