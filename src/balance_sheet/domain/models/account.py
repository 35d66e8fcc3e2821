"""Bucket account domain models."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from balance_sheet.core.money import ZERO, divide
from balance_sheet.domain.models.enums import TransactionType
from balance_sheet.domain.models.transaction import (
    InstrumentTrade,
    LiquidTransaction,
    Transaction,
    is_trade,
)


@dataclass(frozen=True)
class Holding:
    """Net position in one instrument with its average purchase price."""

    instrument_id: str
    name: str
    area: Optional[str]
    quantity: Decimal
    average_price: Decimal


@dataclass
class PlannedExpenseEntry:
    """An expected future expense the planned-expenses bucket saves for."""

    name: str
    estimated_amount: Decimal
    expiration_date: Optional[date] = None


def calculate_balance(initial_balance: Decimal, transactions: list[Transaction]) -> Decimal:
    """
    Replay cash movements: deposits add, withdrawals subtract,
    buys cost gross + fees, sells return gross - fees.
    """
    balance = initial_balance
    for txn in transactions:
        balance += txn.net_cash_impact
    return balance


def calculate_holdings(transactions: list[Transaction]) -> dict[str, Holding]:
    """
    Derive instrument holdings from trades.

    Average price is the cost of all buys (fees included) divided by the
    net quantity. Only positive positions are returned.
    """
    trades: dict[str, list[InstrumentTrade]] = defaultdict(list)
    for txn in transactions:
        if is_trade(txn):
            trades[txn.instrument_id].append(txn)

    holdings: dict[str, Holding] = {}
    for instrument_id, txns in trades.items():
        quantity = sum((t.signed_quantity for t in txns), ZERO)
        if quantity <= ZERO:
            continue
        cost = sum(
            (t.gross_amount + t.fees for t in txns if t.txn_type == TransactionType.BUY),
            ZERO,
        )
        first = txns[0]
        holdings[instrument_id] = Holding(
            instrument_id=instrument_id,
            name=first.name or instrument_id,
            area=first.area,
            quantity=quantity,
            average_price=divide(cost, quantity),
        )
    return holdings


@dataclass
class MainBankAccount:
    """Main bank account for day-to-day income and expenses."""

    name: str = "Main Account"
    initial_balance: Decimal = field(default_factory=lambda: ZERO)
    transactions: list[LiquidTransaction] = field(default_factory=list)

    @property
    def current_balance(self) -> Decimal:
        return self.initial_balance + sum((t.amount for t in self.transactions), ZERO)

    @property
    def total_income(self) -> Decimal:
        return sum((t.amount for t in self.transactions if t.amount > ZERO), ZERO)

    @property
    def total_expenses(self) -> Decimal:
        return sum((-t.amount for t in self.transactions if t.amount < ZERO), ZERO)


@dataclass
class PlannedExpensesAccount:
    """Reserve for planned expenses; may be held in cash or instruments."""

    name: str = "Planned Expenses"
    initial_balance: Decimal = field(default_factory=lambda: ZERO)
    transactions: list[Transaction] = field(default_factory=list)
    planned_expenses: list[PlannedExpenseEntry] = field(default_factory=list)

    @property
    def current_balance(self) -> Decimal:
        return calculate_balance(self.initial_balance, self.transactions)

    @property
    def holdings(self) -> dict[str, Holding]:
        return calculate_holdings(self.transactions)

    @property
    def has_trades(self) -> bool:
        return any(is_trade(t) for t in self.transactions)


@dataclass
class EmergencyFundAccount:
    """Emergency fund sized as a number of months of average expenses."""

    name: str = "Emergency Fund"
    initial_balance: Decimal = field(default_factory=lambda: ZERO)
    transactions: list[Transaction] = field(default_factory=list)
    target_monthly_expenses: int = 6

    @property
    def current_balance(self) -> Decimal:
        """Deposits minus withdrawals; trades do not move the fund's capital."""
        balance = self.initial_balance
        for txn in self.transactions:
            if not is_trade(txn):
                balance += txn.net_cash_impact
        return balance

    @property
    def has_trades(self) -> bool:
        return any(is_trade(t) for t in self.transactions)


@dataclass
class InvestmentAccount:
    """Brokerage account holding ETF positions."""

    name: str = "Investments"
    initial_balance: Decimal = field(default_factory=lambda: ZERO)
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def current_balance(self) -> Decimal:
        return calculate_balance(self.initial_balance, self.transactions)

    @property
    def holdings(self) -> dict[str, Holding]:
        return calculate_holdings(self.transactions)
