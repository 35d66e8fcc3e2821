"""Repository protocol definitions (interfaces)."""

from balance_sheet.repositories.protocols.price_cache_repo import PriceCacheRepository

__all__ = [
    "PriceCacheRepository",
]
