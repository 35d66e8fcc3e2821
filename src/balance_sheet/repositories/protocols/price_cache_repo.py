"""Price cache repository protocol."""

from typing import Protocol

from balance_sheet.domain.models import PriceCacheEntry


class PriceCacheRepository(Protocol):
    """Interface for persisting the full set of cached prices."""

    def load(self) -> list[PriceCacheEntry]:
        """Read every persisted entry; unreadable entries are skipped."""
        ...

    def save(self, entries: list[PriceCacheEntry]) -> None:
        """Replace the persisted contents with `entries`."""
        ...
