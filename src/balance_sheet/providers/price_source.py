"""Price source protocol and shared base behaviour."""

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class PriceSource(Protocol):
    """
    Protocol for instrument price lookups.

    Implementations never raise on network or parse failures: a missing
    price is reported as None (single lookups) or omitted from the returned
    mapping (range and batch lookups).
    """

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        """Latest known price, or None."""
        ...

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        """Close price on a given date, or None."""
        ...

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        """
        Daily closes for [start, end] inclusive.

        May be empty; sources without range support return {}.
        """
        ...

    def get_current_prices(self, instrument_ids: list[str]) -> dict[str, Decimal]:
        """Current prices for several instruments; absent ids are omitted."""
        ...


class BasePriceSource:
    """Mixin providing the one-call-per-id batch lookup."""

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        raise NotImplementedError

    def get_current_prices(self, instrument_ids: list[str]) -> dict[str, Decimal]:
        result: dict[str, Decimal] = {}
        for instrument_id in instrument_ids:
            price = self.get_current_price(instrument_id)
            if price is not None:
                result[instrument_id] = price
        return result
