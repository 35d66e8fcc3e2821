"""Planned expenses bucket summary."""

from decimal import Decimal
from typing import Optional

from balance_sheet.core.money import ZERO, safe_ratio, to_money
from balance_sheet.domain.models import PlannedExpensesAccount
from balance_sheet.domain.views import PlannedExpensesSummary


class PlannedExpensesService:
    """Summarizes the planned expenses reserve."""

    def summarize(
        self,
        account: PlannedExpensesAccount,
        current_prices: Optional[dict[str, Decimal]] = None,
    ) -> PlannedExpensesSummary:
        """
        Accrued capital split into cash (liquid) and holdings (invested).

        Holdings without a current price are valued at their average price.
        Coverage ratio is accrued / estimated at 4dp, zero with nothing estimated.
        """
        current_prices = current_prices or {}
        total_estimated = sum((e.estimated_amount for e in account.planned_expenses), ZERO)

        invested = sum(
            (
                holding.quantity * current_prices.get(instrument_id, holding.average_price)
                for instrument_id, holding in account.holdings.items()
            ),
            ZERO,
        )
        liquid = account.current_balance
        total_accrued = invested + liquid

        return PlannedExpensesSummary(
            total_estimated=to_money(total_estimated),
            total_accrued=to_money(total_accrued),
            coverage_ratio=safe_ratio(total_accrued, total_estimated, 4),
            liquid_accrued=to_money(liquid),
            invested_accrued=to_money(invested),
            is_invested=account.has_trades,
        )
