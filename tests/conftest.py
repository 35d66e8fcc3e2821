"""
Pytest configuration and fixtures for balance sheet tests.

This module provides:
- Fake price sources that record every delegate call
- A controllable clock for freshness tests
- Factory helpers for transactions
- Cache repository fixtures backed by a temporary cache file
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Optional

import pytest

from balance_sheet.config.settings import reset_settings
from balance_sheet.core.timezone import UTC
from balance_sheet.domain.models import (
    Deposit,
    InstrumentBuy,
    InstrumentSell,
    Withdrawal,
)
from balance_sheet.providers.price_source import BasePriceSource
from balance_sheet.repositories.csv import CsvPriceCacheRepository


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


class FixedClock:
    """Clock returning a settable 'now'; advance() moves it forward."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, hours: float = 0, days: float = 0) -> None:
        self.now = self.now + timedelta(hours=hours, days=days)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    """Controllable clock starting at fixed_now."""
    return FixedClock(fixed_now)


@pytest.fixture(autouse=True)
def clean_settings():
    """Reset global settings around every test."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# PRICE SOURCE FAKES
# =============================================================================


class RecordingPriceSource(BasePriceSource):
    """
    Deterministic price source that records every call.

    current: instrument -> price
    historical: (instrument, date) -> price
    """

    def __init__(
        self,
        current: Optional[dict[str, Decimal]] = None,
        historical: Optional[dict[tuple[str, date], Decimal]] = None,
    ):
        self.current = dict(current or {})
        self.historical = dict(historical or {})
        self.current_calls: list[str] = []
        self.historical_calls: list[tuple[str, date]] = []
        self.range_calls: list[tuple[str, date, date]] = []

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        self.current_calls.append(instrument_id)
        return self.current.get(instrument_id)

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        self.historical_calls.append((instrument_id, on))
        return self.historical.get((instrument_id, on))

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        self.range_calls.append((instrument_id, start, end))
        return {
            d: p
            for (i, d), p in self.historical.items()
            if i == instrument_id and start <= d <= end
        }


class EmptyPriceSource(BasePriceSource):
    """Price source whose upstream never has data (failed fetches)."""

    def __init__(self):
        self.calls = 0

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        self.calls += 1
        return None

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        self.calls += 1
        return None

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        self.calls += 1
        return {}


class ConstantHistoricalSource(BasePriceSource):
    """Every instrument trades at one fixed price on every date."""

    def __init__(self, price: Decimal):
        self._price = price

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        return self._price

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        return self._price

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        return {}


@pytest.fixture
def recording_source() -> RecordingPriceSource:
    """Recording source with one current and a week of historical prices."""
    historical = {
        ("VWCE.DE", date(2024, 1, d)): Decimal("100") + d for d in range(1, 8)
    }
    return RecordingPriceSource(
        current={"VWCE.DE": Decimal("118.42"), "SWDA.MI": Decimal("98.75")},
        historical=historical,
    )


@pytest.fixture
def empty_source() -> EmptyPriceSource:
    """Provide a source that never returns prices."""
    return EmptyPriceSource()


# =============================================================================
# CACHE FIXTURES
# =============================================================================


@pytest.fixture
def cache_path(tmp_path) -> Path:
    """Path of a not-yet-existing cache file."""
    return tmp_path / "cache" / "price_cache.csv"


@pytest.fixture
def cache_repo(cache_path) -> CsvPriceCacheRepository:
    """Provide a CSV cache repository in a temp dir."""
    return CsvPriceCacheRepository(cache_path)


# =============================================================================
# TRANSACTION FACTORIES
# =============================================================================


def buy(
    on: date,
    instrument_id: str,
    quantity: str,
    unit_price: str,
    fees: str = "0",
    name: Optional[str] = None,
    area: Optional[str] = None,
) -> InstrumentBuy:
    """Build an InstrumentBuy from string amounts."""
    return InstrumentBuy(
        date=on,
        instrument_id=instrument_id,
        quantity=Decimal(quantity),
        unit_price=Decimal(unit_price),
        fees=Decimal(fees),
        name=name,
        area=area,
    )


def sell(
    on: date,
    instrument_id: str,
    quantity: str,
    unit_price: str,
    fees: str = "0",
) -> InstrumentSell:
    """Build an InstrumentSell from string amounts."""
    return InstrumentSell(
        date=on,
        instrument_id=instrument_id,
        quantity=Decimal(quantity),
        unit_price=Decimal(unit_price),
        fees=Decimal(fees),
    )


def deposit(on: date, amount: str) -> Deposit:
    return Deposit(date=on, amount=Decimal(amount))


def withdrawal(on: date, amount: str) -> Withdrawal:
    return Withdrawal(date=on, amount=Decimal(amount))
