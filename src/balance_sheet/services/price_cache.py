"""Persistent, freshness-aware price cache in front of a price source."""

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

from balance_sheet.core.locks import ReadWriteLock
from balance_sheet.core.timezone import now_utc
from balance_sheet.domain.models import (
    CacheKey,
    PriceCacheEntry,
    PriceKind,
    current_key,
    historical_key,
)
from balance_sheet.domain.views import CacheStats
from balance_sheet.providers.price_source import BasePriceSource, PriceSource
from balance_sheet.repositories.protocols import PriceCacheRepository

logger = logging.getLogger(__name__)


class PriceCache(BasePriceSource):
    """
    Price source decorator that remembers fetched prices on disk.

    Current prices are fresh for `cache_duration_hours`; historical closes
    never expire. Lookups read under a shared lock; the delegate is called
    with no lock held, and new entries are stored and persisted under the
    exclusive lock, so no reader sees a half-applied update.

    Concurrent misses on the same key may each call the delegate. The last
    write wins for current prices; a historical close, once stored, is never
    replaced.
    """

    def __init__(
        self,
        delegate: PriceSource,
        repository: PriceCacheRepository,
        cache_duration_hours: int = 24,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._delegate = delegate
        self._repository = repository
        self._ttl = timedelta(hours=cache_duration_hours)
        self._clock = clock
        self._lock = ReadWriteLock()
        self._cache: dict[CacheKey, PriceCacheEntry] = {}
        self.reload()

    # Price lookups

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        """Cached price while fresh; otherwise fetch, store and persist."""
        with self._lock.read():
            entry = self._cache.get(current_key(instrument_id))
            if entry is not None and self._is_fresh(entry):
                logger.debug(f"Cache hit for current price of {instrument_id}")
                return entry.price

        logger.debug(f"Cache miss or stale for current price of {instrument_id}, fetching")
        price = self._delegate.get_current_price(instrument_id)
        if price is None:
            return None

        self._store(
            [
                PriceCacheEntry(
                    instrument_id=instrument_id,
                    kind=PriceKind.CURRENT,
                    price_date=None,
                    price=price,
                    fetched_at=self._clock(),
                )
            ]
        )
        return price

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        """Any cached close is a hit; otherwise fetch, store and persist."""
        with self._lock.read():
            entry = self._cache.get(historical_key(instrument_id, on))
            if entry is not None:
                logger.debug(f"Cache hit for historical price of {instrument_id} on {on}")
                return entry.price

        logger.debug(f"Cache miss for historical price of {instrument_id} on {on}, fetching")
        price = self._delegate.get_historical_price(instrument_id, on)
        if price is None:
            return None

        self._store([self._historical_entry(instrument_id, on, price)], keep_existing=True)
        return price

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        """
        Closes for every day in [start, end].

        If any day is missing from the cache the delegate is asked once for
        the whole range (not just the gaps). Only days that were missing are
        stored and merged; cached closes are kept.
        """
        if start > end:
            return {}

        result: dict[date, Decimal] = {}
        missing: list[date] = []
        with self._lock.read():
            day = start
            while day <= end:
                entry = self._cache.get(historical_key(instrument_id, day))
                if entry is not None:
                    result[day] = entry.price
                else:
                    missing.append(day)
                day += timedelta(days=1)

        if not missing:
            logger.debug(
                f"All historical prices for {instrument_id} from {start} to {end} found in cache"
            )
            return result

        logger.debug(
            f"Fetching {len(missing)} missing historical prices for {instrument_id} "
            f"({start} to {end})"
        )
        fetched = self._delegate.get_historical_prices(instrument_id, start, end)
        missing_days = set(missing)
        new_prices = {d: p for d, p in fetched.items() if d in missing_days}
        if new_prices:
            self._store(
                [self._historical_entry(instrument_id, d, p) for d, p in new_prices.items()],
                keep_existing=True,
            )
            result.update(new_prices)
        return result

    # Persistence and administration

    def persist(self) -> None:
        """Write the whole cache to the repository."""
        with self._lock.write():
            self._save()

    def reload(self) -> None:
        """Replace the in-memory cache with the repository contents."""
        entries = self._repository.load()
        with self._lock.write():
            self._cache = {entry.key: entry for entry in entries}
        logger.info(f"Price cache holds {len(entries)} entries")

    def clear_all(self) -> None:
        """Drop every cached price."""
        with self._lock.write():
            self._cache.clear()
            self._save()
        logger.info("Cache cleared")

    def clear_for_instrument(self, instrument_id: str) -> None:
        """Drop current and historical prices of one instrument."""
        with self._lock.write():
            self._cache = {
                key: entry for key, entry in self._cache.items() if key[0] != instrument_id
            }
            self._save()
        logger.info(f"Cache cleared for ticker {instrument_id}")

    def stats(self) -> CacheStats:
        """Counts of total, current, historical and fresh current entries."""
        with self._lock.read():
            entries = list(self._cache.values())
            current = [e for e in entries if e.kind == PriceKind.CURRENT]
            return CacheStats(
                total_entries=len(entries),
                current_prices=len(current),
                historical_prices=len(entries) - len(current),
                fresh_current_prices=sum(1 for e in current if self._is_fresh(e)),
            )

    # Internals

    def _historical_entry(self, instrument_id: str, on: date, price: Decimal) -> PriceCacheEntry:
        return PriceCacheEntry(
            instrument_id=instrument_id,
            kind=PriceKind.HISTORICAL,
            price_date=on,
            price=price,
            fetched_at=self._clock(),
        )

    def _store(self, entries: list[PriceCacheEntry], keep_existing: bool = False) -> None:
        with self._lock.write():
            for entry in entries:
                if keep_existing and entry.key in self._cache:
                    continue
                self._cache[entry.key] = entry
            self._save()

    def _save(self) -> None:
        # Caller holds the write lock
        try:
            self._repository.save(list(self._cache.values()))
        except OSError as e:
            logger.error(f"Failed to save price cache: {e}")

    def _is_fresh(self, entry: PriceCacheEntry) -> bool:
        if entry.kind == PriceKind.HISTORICAL:
            return True
        return self._clock() - entry.fetched_at < self._ttl
