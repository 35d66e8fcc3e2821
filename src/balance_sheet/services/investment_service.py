"""Investments bucket summary."""

from decimal import Decimal

from balance_sheet.core.money import ZERO, to_money
from balance_sheet.domain.models import InvestmentAccount
from balance_sheet.domain.views import Investment, InvestmentsSummary
from balance_sheet.services.portfolio_aggregator import investment_weights


class InvestmentService:
    """Values the investment account's holdings at current prices."""

    def summarize_items(self, items: list[Investment]) -> InvestmentsSummary:
        """Totals and weights for already-priced investments."""
        return InvestmentsSummary(
            total_invested=to_money(sum((i.invested_value for i in items), ZERO)),
            total_current=to_money(sum((i.current_value for i in items), ZERO)),
            items=investment_weights(items),
        )

    def summarize(
        self,
        account: InvestmentAccount,
        current_prices: dict[str, Decimal],
    ) -> InvestmentsSummary:
        """Holdings without a current price are valued at zero."""
        items = [
            Investment(
                name=holding.name,
                instrument_id=holding.instrument_id,
                area=holding.area,
                quantity=holding.quantity,
                average_price=holding.average_price,
                current_price=current_prices.get(instrument_id, ZERO),
            )
            for instrument_id, holding in account.holdings.items()
        ]
        return self.summarize_items(items)
