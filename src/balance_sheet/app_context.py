"""Application context for in-process service management.

Builds the configured price source, wraps it in the persistent price cache
and hands the same cache instance to every service that needs prices.
"""

from pathlib import Path
from typing import Optional

from balance_sheet.config.settings import Settings, get_settings
from balance_sheet.domain.models import PriceSourceType
from balance_sheet.providers import (
    CsvPriceSource,
    PriceSource,
    StubPriceSource,
    YahooFinancePriceSource,
)
from balance_sheet.repositories.csv import CsvPriceCacheRepository
from balance_sheet.services import (
    PerformanceService,
    PriceCache,
    SnapshotService,
    ValuationEngine,
)


def create_price_source(settings: Settings) -> PriceSource:
    """Create the raw price source selected by configuration."""
    if settings.price_source_type == PriceSourceType.CSV:
        return CsvPriceSource(Path(settings.csv_prices_path))
    if settings.price_source_type == PriceSourceType.STUB:
        return StubPriceSource()
    return YahooFinancePriceSource(timeout_seconds=settings.http_timeout_seconds)


class AppContext:
    """
    Application context providing access to all services.

    Services are created lazily and share one PriceCache per context.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        price_source: Optional[PriceSource] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Optional settings. If not provided, uses the global settings.
            price_source: Optional raw price source overriding the configured one.
        """
        self._settings = settings or get_settings()
        self._raw_price_source = price_source

        # Service instances (lazy initialized)
        self._price_cache: Optional[PriceCache] = None
        self._valuation_engine: Optional[ValuationEngine] = None
        self._performance_service: Optional[PerformanceService] = None
        self._snapshot_service: Optional[SnapshotService] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def price_cache(self) -> PriceCache:
        """Get the PriceCache instance."""
        if self._price_cache is None:
            delegate = self._raw_price_source or create_price_source(self._settings)
            self._price_cache = PriceCache(
                delegate=delegate,
                repository=CsvPriceCacheRepository(self._settings.get_price_cache_path()),
                cache_duration_hours=self._settings.cache_duration_hours,
            )
        return self._price_cache

    @property
    def valuation(self) -> ValuationEngine:
        """Get the ValuationEngine instance."""
        if self._valuation_engine is None:
            self._valuation_engine = ValuationEngine(price_source=self.price_cache)
        return self._valuation_engine

    @property
    def performance(self) -> PerformanceService:
        """Get the PerformanceService instance."""
        if self._performance_service is None:
            self._performance_service = PerformanceService(
                valuation_engine=self.valuation,
                interval_days=self._settings.historical_performance_interval_days,
            )
        return self._performance_service

    @property
    def snapshot(self) -> SnapshotService:
        """Get the SnapshotService instance."""
        if self._snapshot_service is None:
            self._snapshot_service = SnapshotService(
                price_source=self.price_cache,
                performance_service=self.performance,
            )
        return self._snapshot_service
