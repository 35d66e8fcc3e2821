"""CSV file repository implementations."""

from balance_sheet.repositories.csv.price_cache_repo import CsvPriceCacheRepository, CACHE_COLUMNS

__all__ = [
    "CsvPriceCacheRepository",
    "CACHE_COLUMNS",
]
