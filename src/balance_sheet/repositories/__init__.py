"""Repository layer - data access abstractions and implementations."""

from balance_sheet.repositories.protocols import PriceCacheRepository

__all__ = [
    "PriceCacheRepository",
]
