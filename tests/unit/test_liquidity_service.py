"""
Unit tests for LiquidityService.

Tests cover:
- Income, expense and net balance totals
- 12-month average monthly expense window
- Category and monthly statistics
"""

import pytest
from datetime import date
from decimal import Decimal

from balance_sheet.domain.models import LiquidTransaction, MainBankAccount
from balance_sheet.services import LiquidityService
from balance_sheet.services.liquidity_service import calculate_statistics


def liquid(on: date, amount: str, category: str = "Misc") -> LiquidTransaction:
    return LiquidTransaction(
        date=on, description=category, category=category, amount=Decimal(amount)
    )


class TestLiquidityService:
    """Tests for LiquidityService and calculate_statistics."""

    @pytest.fixture
    def account(self) -> MainBankAccount:
        return MainBankAccount(
            initial_balance=Decimal("1000"),
            transactions=[
                liquid(date(2023, 1, 15), "-600", "Rent"),
                liquid(date(2024, 1, 27), "2500", "Salary"),
                liquid(date(2024, 2, 1), "-800", "Rent"),
                liquid(date(2024, 2, 10), "-400", "Groceries"),
            ],
        )

    def test_summary_totals(self, account):
        """
        GIVEN a main account with one old and two recent expenses
        WHEN summarized on 2024-06-15
        THEN only the last 12 months feed the monthly average
        """
        summary = LiquidityService().summarize(account, today=date(2024, 6, 15))

        assert summary.total_income == Decimal("2500.00")
        assert summary.total_expense == Decimal("1800.00")
        assert summary.net == Decimal("1700.00")
        assert summary.avg_monthly_expense_12m == Decimal("100.00")

    def test_no_expenses_average_is_zero(self):
        account = MainBankAccount(transactions=[liquid(date(2024, 1, 1), "100", "Salary")])

        summary = LiquidityService().summarize(account, today=date(2024, 6, 15))

        assert summary.avg_monthly_expense_12m == Decimal("0.00")

    def test_statistics(self, account):
        stats = calculate_statistics(account.transactions)

        assert stats.total_by_category["Rent"] == Decimal("1400.00")
        assert stats.top_expense_categories[0] == ("Rent", Decimal("1400.00"))
        assert stats.top_income_categories == [("Salary", Decimal("2500.00"))]
        assert [m.year_month for m in stats.monthly_trend] == ["2023-01", "2024-01", "2024-02"]
        assert stats.monthly_trend[-1].net == Decimal("-1200.00")
