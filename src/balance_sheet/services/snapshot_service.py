"""Builds a full portfolio snapshot from the four bucket accounts."""

import logging
from datetime import date
from typing import Optional

from balance_sheet.core.timezone import today as local_today
from balance_sheet.domain.models import (
    EmergencyFundAccount,
    InvestmentAccount,
    MainBankAccount,
    PlannedExpensesAccount,
)
from balance_sheet.domain.views import PortfolioSnapshot
from balance_sheet.providers.price_source import PriceSource
from balance_sheet.services.emergency_fund_service import EmergencyFundService
from balance_sheet.services.investment_service import InvestmentService
from balance_sheet.services.liquidity_service import LiquidityService
from balance_sheet.services.performance_service import PerformanceService
from balance_sheet.services.planned_expenses_service import PlannedExpensesService
from balance_sheet.services.portfolio_aggregator import build_snapshot

logger = logging.getLogger(__name__)


class SnapshotService:
    """
    Service for computing the current portfolio snapshot.

    Current prices come from the (cached) price source in one batch for
    every instrument held by the planned-expenses and investment accounts.
    """

    def __init__(
        self,
        price_source: PriceSource,
        performance_service: PerformanceService,
        liquidity_service: Optional[LiquidityService] = None,
        planned_expenses_service: Optional[PlannedExpensesService] = None,
        emergency_fund_service: Optional[EmergencyFundService] = None,
        investment_service: Optional[InvestmentService] = None,
    ):
        self._prices = price_source
        self._performance = performance_service
        self._liquidity = liquidity_service or LiquidityService()
        self._planned = planned_expenses_service or PlannedExpensesService()
        self._emergency = emergency_fund_service or EmergencyFundService()
        self._investments = investment_service or InvestmentService()

    def build(
        self,
        main: MainBankAccount,
        planned: PlannedExpensesAccount,
        emergency: EmergencyFundAccount,
        investments: InvestmentAccount,
        include_performance: bool = False,
        today: Optional[date] = None,
    ) -> PortfolioSnapshot:
        """Summarize every bucket and aggregate them into a snapshot."""
        today = today or local_today()

        instrument_ids = sorted(set(planned.holdings) | set(investments.holdings))
        current_prices = self._prices.get_current_prices(instrument_ids) if instrument_ids else {}
        missing = [i for i in instrument_ids if i not in current_prices]
        if missing:
            logger.warning(f"No current price for {', '.join(missing)}")

        liquidity_summary = self._liquidity.summarize(main, today=today)
        planned_summary = self._planned.summarize(planned, current_prices)
        emergency_summary = self._emergency.summarize(
            emergency, liquidity_summary.avg_monthly_expense_12m
        )
        investments_summary = self._investments.summarize(investments, current_prices)

        historical = None
        overall = None
        if include_performance:
            historical = self._performance.for_account(investments, today=today)
            planned_summary.historical_performance = self._performance.for_account(
                planned, today=today
            )
            emergency_summary.historical_performance = self._performance.for_account(
                emergency, today=today
            )
            investments_summary.historical_performance = historical
            overall = self._performance.combined(
                [investments, planned, emergency], today=today
            )

        return build_snapshot(
            liquidity_summary,
            planned_summary,
            emergency_summary,
            investments_summary,
            historical_performance=historical,
            overall_historical_performance=overall,
        )
