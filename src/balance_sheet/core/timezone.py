"""Timezone utilities for cache timestamps and reporting dates."""

from datetime import date, datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

UTC = pytz.utc


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def today() -> date:
    """Return today's local calendar date."""
    return date.today()


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Naive timestamps are treated as UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_timestamp(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse an ISO-8601 timestamp and return it in UTC.

    If no timezone is present in the string, assumes UTC (or `default_tz`).
    """
    dt = date_parser.isoparse(value.strip())
    if dt.tzinfo is None:
        tz = default_tz or UTC
        dt = tz.localize(dt)
    return to_utc(dt)


def parse_date(value: str) -> date:
    """Parse an ISO-8601 calendar date (YYYY-MM-DD)."""
    return date.fromisoformat(value.strip())
