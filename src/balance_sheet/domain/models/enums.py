"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of bank account transactions."""

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    BUY = "BUY"
    SELL = "SELL"


class PriceKind(str, Enum):
    """Kinds of cached prices."""

    CURRENT = "CURRENT"  # expires after the freshness window
    HISTORICAL = "HISTORICAL"  # market closes never expire


class PriceSourceType(str, Enum):
    """Configurable price data sources."""

    CSV = "CSV"
    YAHOO_FINANCE = "YAHOO_FINANCE"
    STUB = "STUB"


class EmergencyFundStatus(str, Enum):
    """Emergency fund coverage status."""

    OK = "OK"
    BELOW_TARGET = "BELOW TARGET"
