"""
Yahoo Finance price source.

Fetches daily closes through yfinance. Every network or parsing problem is
caught here and reported as a missing price; nothing propagates to callers.
"""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from balance_sheet.core.exceptions import PriceSourceError
from balance_sheet.providers.price_source import BasePriceSource

logger = logging.getLogger(__name__)

# Window around a single historical date, to reach past weekends and holidays
HISTORICAL_LOOKAROUND_DAYS = 5


def _get_yf():
    import yfinance as yf
    return yf


def _to_date(idx) -> date:
    return idx.date() if hasattr(idx, "date") else idx


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, float) and value != value)


class YahooFinancePriceSource(BasePriceSource):
    """
    HTTP quote source using yfinance daily history.

    Current price is the last close of a one-day history. A request timeout
    applies to every call; a timeout counts as a failed fetch.
    """

    def __init__(self, timeout_seconds: float = 10.0):
        self._timeout = timeout_seconds

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        try:
            closes = self._fetch_closes(instrument_id, period="1d")
        except Exception as e:
            logger.warning(f"Error fetching current price for {instrument_id}: {e}")
            return None
        if not closes:
            logger.debug(f"No current price returned for {instrument_id}")
            return None
        return closes[max(closes)]

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        """
        Close on `on`, or the closest earlier close within the lookaround window.
        """
        prices = self.get_historical_prices(
            instrument_id,
            on - timedelta(days=HISTORICAL_LOOKAROUND_DAYS),
            on + timedelta(days=HISTORICAL_LOOKAROUND_DAYS),
        )
        if on in prices:
            return prices[on]
        earlier = [d for d in prices if d <= on]
        if not earlier:
            return None
        return prices[max(earlier)]

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        if start > end:
            return {}
        try:
            closes = self._fetch_closes(
                instrument_id,
                start=start,
                end=end + timedelta(days=1),  # yfinance end is exclusive
            )
        except Exception as e:
            logger.warning(
                f"Error fetching historical prices for {instrument_id} "
                f"from {start} to {end}: {e}"
            )
            return {}
        return {d: p for d, p in closes.items() if start <= d <= end}

    def _fetch_closes(self, instrument_id: str, **history_kwargs) -> dict[date, Decimal]:
        """Download daily history and return {date: close}, skipping NaN closes."""
        yf = _get_yf()
        ticker = yf.Ticker(instrument_id)
        hist = ticker.history(
            interval="1d",
            auto_adjust=False,
            timeout=self._timeout,
            **history_kwargs,
        )
        if hist is None or hist.empty:
            return {}
        if "Close" not in hist.columns:
            raise PriceSourceError(instrument_id, "response has no Close column")

        closes: dict[date, Decimal] = {}
        for idx, close in hist["Close"].items():
            if _is_missing(close):
                continue
            closes[_to_date(idx)] = Decimal(str(float(close)))
        return closes
