"""Historical performance of bucket accounts."""

import logging
from datetime import date
from typing import Optional, Union

from balance_sheet.core.timezone import today as local_today
from balance_sheet.domain.models import (
    EmergencyFundAccount,
    InstrumentTrade,
    InvestmentAccount,
    PlannedExpensesAccount,
)
from balance_sheet.domain.views import HistoricalPerformance
from balance_sheet.services.position_reconstructor import collect_trades
from balance_sheet.services.valuation_engine import ValuationEngine

logger = logging.getLogger(__name__)

TradingAccount = Union[InvestmentAccount, PlannedExpensesAccount, EmergencyFundAccount]


class PerformanceService:
    """
    Runs the valuation engine over the trades of one or more accounts.

    The series starts at the earliest trade and ends today.
    """

    def __init__(self, valuation_engine: ValuationEngine, interval_days: int):
        self._engine = valuation_engine
        self._interval_days = interval_days

    def for_account(
        self,
        account: TradingAccount,
        today: Optional[date] = None,
    ) -> Optional[HistoricalPerformance]:
        """Performance of one account's trades; None if it never traded."""
        return self._calculate(collect_trades(account.transactions), today)

    def combined(
        self,
        accounts: list[TradingAccount],
        today: Optional[date] = None,
    ) -> Optional[HistoricalPerformance]:
        """Performance of all trades across accounts; None if none traded."""
        trades: list[InstrumentTrade] = []
        for account in accounts:
            trades.extend(collect_trades(account.transactions))
        return self._calculate(trades, today)

    def _calculate(
        self,
        trades: list[InstrumentTrade],
        today: Optional[date],
    ) -> Optional[HistoricalPerformance]:
        if not trades:
            return None
        end = today or local_today()
        start = min(t.date for t in trades)
        logger.debug(f"Calculating performance of {len(trades)} trades from {start} to {end}")
        return self._engine.calculate(
            trades,
            start=start,
            end=end,
            interval_days=self._interval_days,
        )
