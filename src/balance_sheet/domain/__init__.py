"""Domain layer - pure business models with no external dependencies."""

from balance_sheet.domain.models import (
    Deposit,
    Withdrawal,
    InstrumentBuy,
    InstrumentSell,
    LiquidTransaction,
    Transaction,
    TransactionType,
    PriceKind,
    PriceCacheEntry,
)

__all__ = [
    "Deposit",
    "Withdrawal",
    "InstrumentBuy",
    "InstrumentSell",
    "LiquidTransaction",
    "Transaction",
    "TransactionType",
    "PriceKind",
    "PriceCacheEntry",
]
