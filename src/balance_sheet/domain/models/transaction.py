"""Transaction domain models.

A bank account ledger is a list of `Transaction` values: a closed union of
`Deposit`, `Withdrawal`, `InstrumentBuy` and `InstrumentSell`. Each variant
carries its `txn_type` tag so callers dispatch on the tag rather than on
runtime class checks. Trade quantities are always positive; the variant
decides the sign.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import ClassVar, Optional, Union

from balance_sheet.core.exceptions import ValidationError
from balance_sheet.core.money import ZERO
from balance_sheet.domain.models.enums import TransactionType


@dataclass(frozen=True)
class Deposit:
    """Cash moved into a bucket account."""

    txn_type: ClassVar[TransactionType] = TransactionType.DEPOSIT

    date: date
    amount: Decimal
    note: Optional[str] = None

    @property
    def net_cash_impact(self) -> Decimal:
        return self.amount


@dataclass(frozen=True)
class Withdrawal:
    """Cash moved out of a bucket account."""

    txn_type: ClassVar[TransactionType] = TransactionType.WITHDRAWAL

    date: date
    amount: Decimal
    note: Optional[str] = None

    @property
    def net_cash_impact(self) -> Decimal:
        return -self.amount


@dataclass(frozen=True)
class _InstrumentTrade:
    date: date
    instrument_id: str
    quantity: Decimal
    unit_price: Decimal
    fees: Decimal = field(default_factory=lambda: ZERO)
    name: Optional[str] = None
    area: Optional[str] = None
    note: Optional[str] = None

    def __post_init__(self) -> None:
        if self.quantity <= ZERO:
            raise ValidationError(
                f"Quantity must be positive for {self.instrument_id}: {self.quantity}"
            )

    @property
    def gross_amount(self) -> Decimal:
        """quantity × unit_price, before fees."""
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class InstrumentBuy(_InstrumentTrade):
    """Purchase of an instrument; cash out = gross + fees."""

    txn_type: ClassVar[TransactionType] = TransactionType.BUY

    @property
    def signed_quantity(self) -> Decimal:
        return self.quantity

    @property
    def net_cash_impact(self) -> Decimal:
        return -(self.gross_amount + self.fees)


@dataclass(frozen=True)
class InstrumentSell(_InstrumentTrade):
    """Sale of an instrument; cash in = gross - fees."""

    txn_type: ClassVar[TransactionType] = TransactionType.SELL

    @property
    def signed_quantity(self) -> Decimal:
        return -self.quantity

    @property
    def net_cash_impact(self) -> Decimal:
        return self.gross_amount - self.fees


Transaction = Union[Deposit, Withdrawal, InstrumentBuy, InstrumentSell]
InstrumentTrade = Union[InstrumentBuy, InstrumentSell]

TRADE_TYPES = (TransactionType.BUY, TransactionType.SELL)


def is_trade(txn: Transaction) -> bool:
    """Return True if this is a BUY or SELL transaction."""
    return txn.txn_type in TRADE_TYPES


@dataclass(frozen=True)
class LiquidTransaction:
    """
    Main account movement with a signed amount.

    Positive amounts are income, negative amounts are expenses.
    """

    date: date
    description: str
    category: str
    amount: Decimal
    note: Optional[str] = None
