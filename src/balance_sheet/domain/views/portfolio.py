"""View models for valuation, bucket summaries and the portfolio snapshot."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from balance_sheet.core.money import ZERO
from balance_sheet.domain.models.enums import EmergencyFundStatus


@dataclass(frozen=True)
class PerformancePoint:
    """Portfolio value at one sample date."""

    date: date
    value: Decimal


@dataclass
class HistoricalPerformance:
    """Value series with total and annualized return (percentages)."""

    points: list[PerformancePoint] = field(default_factory=list)
    total_return: Decimal = field(default_factory=lambda: ZERO)
    annualized_return: Optional[Decimal] = None

    @property
    def initial_value(self) -> Decimal:
        return self.points[0].value if self.points else ZERO

    @property
    def final_value(self) -> Decimal:
        return self.points[-1].value if self.points else ZERO


@dataclass(frozen=True)
class Investment:
    """An instrument holding valued at a current price."""

    name: str
    instrument_id: str
    area: Optional[str]
    quantity: Decimal
    average_price: Decimal
    current_price: Decimal

    @property
    def invested_value(self) -> Decimal:
        return self.quantity * self.average_price

    @property
    def current_value(self) -> Decimal:
        return self.quantity * self.current_price

    @property
    def pnl(self) -> Decimal:
        return self.current_value - self.invested_value


@dataclass(frozen=True)
class WeightedInvestment:
    """Investment with its weight (0..1) in the investments bucket."""

    investment: Investment
    weight: Decimal


@dataclass
class MonthlyDataPoint:
    """Income and expense totals for one month (YYYY-MM)."""

    year_month: str
    income: Decimal
    expense: Decimal
    net: Decimal


@dataclass
class TransactionStatistics:
    """Category and monthly breakdown of main account movements."""

    total_by_category: dict[str, Decimal] = field(default_factory=dict)
    monthly_trend: list[MonthlyDataPoint] = field(default_factory=list)
    top_expense_categories: list[tuple[str, Decimal]] = field(default_factory=list)
    top_income_categories: list[tuple[str, Decimal]] = field(default_factory=list)


@dataclass
class LiquiditySummary:
    """Main account summary; `net` is the current balance."""

    total_income: Decimal
    total_expense: Decimal
    net: Decimal
    avg_monthly_expense_12m: Decimal
    statistics: Optional[TransactionStatistics] = None


@dataclass
class PlannedExpensesSummary:
    """
    Planned expenses summary.

    liquid_accrued + invested_accrued == total_accrued (within rounding).
    """

    total_estimated: Decimal
    total_accrued: Decimal
    coverage_ratio: Decimal
    liquid_accrued: Decimal
    invested_accrued: Decimal
    is_invested: bool
    historical_performance: Optional[HistoricalPerformance] = None


@dataclass
class EmergencyFundSummary:
    """Emergency fund summary; `is_liquid` decides which side it counts on."""

    target_capital: Decimal
    current_capital: Decimal
    delta_to_target: Decimal
    status: EmergencyFundStatus
    is_liquid: bool
    historical_performance: Optional[HistoricalPerformance] = None


@dataclass
class InvestmentsSummary:
    """Investments bucket valued at current prices."""

    total_invested: Decimal
    total_current: Decimal
    items: list[WeightedInvestment] = field(default_factory=list)
    historical_performance: Optional[HistoricalPerformance] = None


@dataclass
class PortfolioSnapshot:
    """All bucket summaries merged into net worth and allocation."""

    liquidity: LiquiditySummary
    planned: PlannedExpensesSummary
    emergency: EmergencyFundSummary
    investments: InvestmentsSummary
    liquid_capital: Decimal
    invested_capital: Decimal
    total_net_worth: Decimal
    percent_invested: Decimal
    percent_liquid: Decimal
    historical_performance: Optional[HistoricalPerformance] = None
    overall_historical_performance: Optional[HistoricalPerformance] = None


@dataclass(frozen=True)
class CacheStats:
    """Entry counts of a price cache."""

    total_entries: int
    current_prices: int
    historical_prices: int
    fresh_current_prices: int

    @property
    def stale_current_prices(self) -> int:
        return self.current_prices - self.fresh_current_prices
