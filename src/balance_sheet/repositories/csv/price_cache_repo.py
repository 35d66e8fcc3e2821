"""CSV file implementation of PriceCacheRepository."""

import csv
import logging
import os
import tempfile
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

from balance_sheet.core.exceptions import ValidationError
from balance_sheet.core.timezone import parse_date, parse_timestamp
from balance_sheet.domain.models import PriceCacheEntry, PriceKind

logger = logging.getLogger(__name__)

# Persisted column order
CACHE_COLUMNS = ["ticker", "type", "date", "price", "fetchedAt"]


class CsvPriceCacheRepository:
    """
    Price cache persisted as a flat CSV table.

    The whole file is rewritten on every save. Writes go to a temporary file
    in the same directory which then replaces the cache file, so a crash
    mid-write leaves the previous file intact.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[PriceCacheEntry]:
        """Read all entries; malformed rows are logged and skipped."""
        if not self._path.exists():
            logger.info("Cache file does not exist, starting with empty cache")
            return []

        # Lines are decoded one by one so a corrupt line only loses that row
        with open(self._path, "rb") as cachefile:
            lines = cachefile.read().splitlines()
        if not lines:
            logger.info("Cache file is empty")
            return []

        entries: list[PriceCacheEntry] = []
        for row_num, line in enumerate(lines[1:], start=2):  # header is row 1
            if not line.strip():
                continue
            try:
                row = self._parse_line(line)
                entries.append(self._row_to_entry(row))
            except (ValueError, InvalidOperation, ValidationError, csv.Error) as e:
                logger.warning(f"Failed to parse cache row {row_num}: {line!r} ({e})")

        logger.info(f"Loaded {len(entries)} entries from cache")
        return entries

    def save(self, entries: list[PriceCacheEntry]) -> None:
        """Rewrite the cache file with `entries`."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            dir=self._path.parent,
        )
        try:
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as csvfile:
                writer = csv.writer(csvfile)
                writer.writerow(CACHE_COLUMNS)
                for entry in entries:
                    writer.writerow(self._entry_to_row(entry))
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Cache saved to file with {len(entries)} entries")

    @staticmethod
    def _entry_to_row(entry: PriceCacheEntry) -> list[str]:
        return [
            entry.instrument_id,
            entry.kind.value,
            entry.price_date.isoformat() if entry.price_date else "",
            str(entry.price),
            entry.fetched_at.isoformat(),
        ]

    @staticmethod
    def _parse_line(line: bytes) -> list[str]:
        """Decode one UTF-8 line and split it into CSV fields."""
        text = line.decode("utf-8")  # UnicodeDecodeError is a ValueError
        return next(csv.reader([text], strict=True))

    @staticmethod
    def _row_to_entry(row: list[str]) -> PriceCacheEntry:
        if len(row) < len(CACHE_COLUMNS):
            raise ValueError(f"expected {len(CACHE_COLUMNS)} columns, got {len(row)}")
        ticker, kind, date_str, price_str, fetched_str = (v.strip() for v in row[:5])
        if not ticker:
            raise ValueError("missing ticker")

        price = Decimal(price_str)
        if not price.is_finite():
            raise ValueError(f"invalid price {price_str!r}")
        price_date: Optional[date] = parse_date(date_str) if date_str else None

        return PriceCacheEntry(
            instrument_id=ticker,
            kind=PriceKind(kind),
            price_date=price_date,
            price=price,
            fetched_at=parse_timestamp(fetched_str),
        )
