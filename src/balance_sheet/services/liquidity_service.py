"""Liquidity (main account) summary and transaction statistics."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional

from dateutil.relativedelta import relativedelta

from balance_sheet.core.money import ZERO, divide, to_money
from balance_sheet.core.timezone import today as local_today
from balance_sheet.domain.models import LiquidTransaction, MainBankAccount
from balance_sheet.domain.views import (
    LiquiditySummary,
    MonthlyDataPoint,
    TransactionStatistics,
)

TOP_CATEGORIES = 5
AVERAGE_WINDOW_MONTHS = 12


def calculate_statistics(transactions: list[LiquidTransaction]) -> TransactionStatistics:
    """Totals by category, monthly trend and top income/expense categories."""
    by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
    expenses: dict[str, Decimal] = defaultdict(lambda: ZERO)
    incomes: dict[str, Decimal] = defaultdict(lambda: ZERO)
    months: dict[str, list[LiquidTransaction]] = defaultdict(list)

    for txn in transactions:
        by_category[txn.category] += abs(txn.amount)
        if txn.amount < ZERO:
            expenses[txn.category] += -txn.amount
        elif txn.amount > ZERO:
            incomes[txn.category] += txn.amount
        months[f"{txn.date.year}-{txn.date.month:02d}"].append(txn)

    trend = []
    for year_month in sorted(months):
        txns = months[year_month]
        income = sum((t.amount for t in txns if t.amount > ZERO), ZERO)
        expense = sum((-t.amount for t in txns if t.amount < ZERO), ZERO)
        trend.append(
            MonthlyDataPoint(
                year_month=year_month,
                income=to_money(income),
                expense=to_money(expense),
                net=to_money(income - expense),
            )
        )

    def top(totals: dict[str, Decimal]) -> list[tuple[str, Decimal]]:
        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [(category, to_money(amount)) for category, amount in ranked[:TOP_CATEGORIES]]

    return TransactionStatistics(
        total_by_category={c: to_money(a) for c, a in by_category.items()},
        monthly_trend=trend,
        top_expense_categories=top(expenses),
        top_income_categories=top(incomes),
    )


class LiquidityService:
    """Summarizes the main bank account."""

    def summarize(
        self,
        account: MainBankAccount,
        today: Optional[date] = None,
    ) -> LiquiditySummary:
        """
        Income, expenses, net balance and the average monthly expense
        over the last 12 months (absolute value).
        """
        today = today or local_today()
        window_start = today - relativedelta(months=AVERAGE_WINDOW_MONTHS)
        spent = sum(
            (-t.amount for t in account.transactions if t.amount < ZERO and t.date >= window_start),
            ZERO,
        )
        avg_monthly = ZERO if spent == ZERO else divide(spent, AVERAGE_WINDOW_MONTHS, 2)

        return LiquiditySummary(
            total_income=to_money(account.total_income),
            total_expense=to_money(account.total_expenses),
            net=to_money(account.current_balance),
            avg_monthly_expense_12m=to_money(avg_monthly),
            statistics=calculate_statistics(account.transactions),
        )
