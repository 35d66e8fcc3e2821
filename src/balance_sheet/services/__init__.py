"""Service layer - valuation, caching and aggregation."""

from balance_sheet.services.price_cache import PriceCache
from balance_sheet.services.position_reconstructor import (
    reconstruct_positions,
    active_positions,
    collect_trades,
)
from balance_sheet.services.valuation_engine import ValuationEngine
from balance_sheet.services.performance_service import PerformanceService
from balance_sheet.services.portfolio_aggregator import build_snapshot, investment_weights
from balance_sheet.services.liquidity_service import LiquidityService
from balance_sheet.services.planned_expenses_service import PlannedExpensesService
from balance_sheet.services.emergency_fund_service import EmergencyFundService
from balance_sheet.services.investment_service import InvestmentService
from balance_sheet.services.snapshot_service import SnapshotService

__all__ = [
    "PriceCache",
    "reconstruct_positions",
    "active_positions",
    "collect_trades",
    "ValuationEngine",
    "PerformanceService",
    "build_snapshot",
    "investment_weights",
    "LiquidityService",
    "PlannedExpensesService",
    "EmergencyFundService",
    "InvestmentService",
    "SnapshotService",
]
