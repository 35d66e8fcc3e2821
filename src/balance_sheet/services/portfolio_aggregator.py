"""Merges bucket summaries into one portfolio snapshot."""

from typing import Optional

from balance_sheet.core.money import ONE, ZERO, WEIGHT_SCALE, safe_ratio, to_money
from balance_sheet.domain.views import (
    EmergencyFundSummary,
    HistoricalPerformance,
    Investment,
    InvestmentsSummary,
    LiquiditySummary,
    PlannedExpensesSummary,
    PortfolioSnapshot,
    WeightedInvestment,
)


def investment_weights(items: list[Investment]) -> list[WeightedInvestment]:
    """
    Weight of each item by current value (0..1, 6dp).

    Every weight is zero when the total current value is zero.
    """
    total_current = sum((i.current_value for i in items), ZERO)
    return [
        WeightedInvestment(
            investment=item,
            weight=safe_ratio(item.current_value, total_current, WEIGHT_SCALE),
        )
        for item in items
    ]


def build_snapshot(
    liquidity: LiquiditySummary,
    planned: PlannedExpensesSummary,
    emergency: EmergencyFundSummary,
    investments: InvestmentsSummary,
    historical_performance: Optional[HistoricalPerformance] = None,
    overall_historical_performance: Optional[HistoricalPerformance] = None,
) -> PortfolioSnapshot:
    """
    Net worth and liquid/invested split across the four buckets.

    The emergency fund lands on the liquid or invested side according to
    its own `is_liquid` flag. Planned expenses contribute both portions.
    """
    emergency_liquid = emergency.current_capital if emergency.is_liquid else ZERO
    emergency_invested = ZERO if emergency.is_liquid else emergency.current_capital

    liquid_capital = liquidity.net + planned.liquid_accrued + emergency_liquid
    invested_capital = investments.total_current + planned.invested_accrued + emergency_invested

    total_net_worth = to_money(liquid_capital + invested_capital)
    percent_invested = safe_ratio(invested_capital, total_net_worth, 4)

    return PortfolioSnapshot(
        liquidity=liquidity,
        planned=planned,
        emergency=emergency,
        investments=investments,
        liquid_capital=to_money(liquid_capital),
        invested_capital=to_money(invested_capital),
        total_net_worth=total_net_worth,
        percent_invested=percent_invested,
        percent_liquid=ONE - percent_invested,
        historical_performance=historical_performance,
        overall_historical_performance=overall_historical_performance,
    )
