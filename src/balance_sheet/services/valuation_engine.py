"""Historical valuation of a transaction log."""

import logging
import math
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from balance_sheet.core.exceptions import ValidationError
from balance_sheet.core.money import HUNDRED, ZERO, divide, to_money
from balance_sheet.core.timezone import today as local_today
from balance_sheet.domain.models import Transaction
from balance_sheet.domain.views import HistoricalPerformance, PerformancePoint
from balance_sheet.providers.price_source import PriceSource
from balance_sheet.services.position_reconstructor import active_positions

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_DAYS = 30
DAYS_PER_YEAR = Decimal("365.25")


def sample_dates(start: date, end: date, interval_days: int) -> list[date]:
    """
    start, start + interval, ... up to end, always finishing on `end`.

    When start is after end the only sample is `end`.
    """
    if interval_days < 1:
        raise ValidationError(f"interval_days must be at least 1, got {interval_days}")

    dates: list[date] = []
    current = start
    step = timedelta(days=interval_days)
    while current <= end:
        dates.append(current)
        current += step
    if not dates or dates[-1] != end:
        dates.append(end)
    return dates


def total_return(initial_value: Decimal, final_value: Decimal) -> Decimal:
    """Percentage change, 2dp; zero when the initial value is zero."""
    if initial_value == ZERO:
        return to_money(ZERO)
    return to_money(divide(final_value - initial_value, initial_value) * HUNDRED)


def annualized_return(
    initial_value: Decimal,
    final_value: Decimal,
    start: date,
    end: date,
) -> Optional[Decimal]:
    """
    Compound annual growth rate as a percentage, 2dp.

    None when the period is empty, the initial value is zero, or the rate
    is outside the float range. The fractional power is taken in floating
    point and re-quantized.
    """
    days = (end - start).days
    if days <= 0 or initial_value == ZERO:
        return None
    years = divide(days, DAYS_PER_YEAR, 6)
    if years <= ZERO:
        return None
    ratio = divide(final_value, initial_value, 6)
    if ratio < ZERO:
        # No real-valued growth rate for a sign change
        return None
    try:
        annualized = (float(ratio) ** (1.0 / float(years)) - 1.0) * 100.0
    except OverflowError:
        logger.debug(f"Annualized return out of range for ratio {ratio} over {years} years")
        return None
    if not math.isfinite(annualized):
        return None
    return to_money(Decimal(str(annualized)))


class ValuationEngine:
    """
    Values a transaction log at sampled dates using historical prices.

    Pure apart from the price lookups, which may populate a price cache.
    """

    def __init__(self, price_source: PriceSource):
        self._prices = price_source

    def value_at(self, transactions: list[Transaction], on: date) -> Decimal:
        """
        Portfolio value on a date: Σ quantity × close, money rounded.

        Missing closes count as zero.
        """
        total = ZERO
        for instrument_id, quantity in active_positions(transactions, on).items():
            price = self._prices.get_historical_price(instrument_id, on)
            if price is None:
                logger.debug(f"No historical price for {instrument_id} on {on}, valuing at 0")
                price = ZERO
            total += quantity * price
        return to_money(total)

    def calculate(
        self,
        transactions: list[Transaction],
        start: date,
        end: Optional[date] = None,
        interval_days: int = DEFAULT_INTERVAL_DAYS,
        today: Optional[date] = None,
    ) -> HistoricalPerformance:
        """
        Value series from `start` to `end` (default today) every `interval_days`,
        with total and annualized return.
        """
        if end is None:
            end = today or local_today()

        points = [
            PerformancePoint(date=d, value=self.value_at(transactions, d))
            for d in sample_dates(start, end, interval_days)
        ]

        initial_value = points[0].value
        final_value = points[-1].value
        return HistoricalPerformance(
            points=points,
            total_return=total_return(initial_value, final_value),
            annualized_return=annualized_return(initial_value, final_value, start, end),
        )
