"""View models for service outputs."""

from balance_sheet.domain.views.portfolio import (
    PerformancePoint,
    HistoricalPerformance,
    Investment,
    WeightedInvestment,
    MonthlyDataPoint,
    TransactionStatistics,
    LiquiditySummary,
    PlannedExpensesSummary,
    EmergencyFundSummary,
    InvestmentsSummary,
    PortfolioSnapshot,
    CacheStats,
)

__all__ = [
    "PerformancePoint",
    "HistoricalPerformance",
    "Investment",
    "WeightedInvestment",
    "MonthlyDataPoint",
    "TransactionStatistics",
    "LiquiditySummary",
    "PlannedExpensesSummary",
    "EmergencyFundSummary",
    "InvestmentsSummary",
    "PortfolioSnapshot",
    "CacheStats",
]
