"""Core utilities and shared functionality."""

from balance_sheet.core.timezone import (
    now_utc,
    today,
    to_utc,
    parse_timestamp,
    parse_date,
    UTC,
)
from balance_sheet.core.exceptions import (
    AppError,
    ValidationError,
    PriceSourceError,
)
from balance_sheet.core.locks import ReadWriteLock

__all__ = [
    "now_utc",
    "today",
    "to_utc",
    "parse_timestamp",
    "parse_date",
    "UTC",
    "AppError",
    "ValidationError",
    "PriceSourceError",
    "ReadWriteLock",
]
