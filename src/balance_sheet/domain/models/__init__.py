"""Domain models package."""

from balance_sheet.domain.models.enums import (
    TransactionType,
    PriceKind,
    PriceSourceType,
    EmergencyFundStatus,
)
from balance_sheet.domain.models.transaction import (
    Deposit,
    Withdrawal,
    InstrumentBuy,
    InstrumentSell,
    InstrumentTrade,
    LiquidTransaction,
    Transaction,
    is_trade,
)
from balance_sheet.domain.models.account import (
    Holding,
    PlannedExpenseEntry,
    MainBankAccount,
    PlannedExpensesAccount,
    EmergencyFundAccount,
    InvestmentAccount,
    calculate_balance,
    calculate_holdings,
)
from balance_sheet.domain.models.price_cache import (
    CacheKey,
    PriceCacheEntry,
    current_key,
    historical_key,
)

__all__ = [
    "TransactionType",
    "PriceKind",
    "PriceSourceType",
    "EmergencyFundStatus",
    "Deposit",
    "Withdrawal",
    "InstrumentBuy",
    "InstrumentSell",
    "InstrumentTrade",
    "LiquidTransaction",
    "Transaction",
    "is_trade",
    "Holding",
    "PlannedExpenseEntry",
    "MainBankAccount",
    "PlannedExpensesAccount",
    "EmergencyFundAccount",
    "InvestmentAccount",
    "calculate_balance",
    "calculate_holdings",
    "CacheKey",
    "PriceCacheEntry",
    "current_key",
    "historical_key",
]
