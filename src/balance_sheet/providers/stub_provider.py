"""Stub price source for offline/testing use."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from balance_sheet.providers.price_source import BasePriceSource


# Deterministic fake prices for common ETFs
_STUB_PRICES: dict[str, Decimal] = {
    "VWCE.DE": Decimal("118.42"),
    "SWDA.MI": Decimal("98.75"),
    "EIMI.MI": Decimal("33.10"),
    "CSSPX.MI": Decimal("560.30"),
    "AGGH.MI": Decimal("5.12"),
    "SPY": Decimal("485.25"),
    "VTI": Decimal("252.30"),
}


class StubPriceSource(BasePriceSource):
    """
    Stub source with fixed prices.

    Unknown instruments have no price. Historical lookups return the fixed
    price for every date so offline valuation series stay flat.
    """

    def __init__(self, prices: Optional[dict[str, Decimal]] = None):
        self._prices = dict(_STUB_PRICES if prices is None else prices)

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        return self._prices.get(instrument_id)

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        return self._prices.get(instrument_id)

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        price = self._prices.get(instrument_id)
        if price is None or start > end:
            return {}
        return {start + timedelta(days=n): price for n in range((end - start).days + 1)}
