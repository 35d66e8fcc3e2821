"""CSV-backed price source reading a `ticker,price` file."""

import csv
import logging
import threading
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional

from balance_sheet.core.exceptions import ValidationError
from balance_sheet.core.money import parse_decimal
from balance_sheet.providers.price_source import BasePriceSource

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["ticker", "price"]


class CsvPriceSource(BasePriceSource):
    """
    Price source backed by a static CSV of current prices.

    The file is read once, on first use. It has no history: a historical
    lookup falls back to the current price and range lookups are empty.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._prices: Optional[dict[str, Decimal]] = None
        self._load_lock = threading.Lock()

    def _get_prices(self) -> dict[str, Decimal]:
        with self._load_lock:
            if self._prices is None:
                self._prices = self._load_prices()
            return self._prices

    def _load_prices(self) -> dict[str, Decimal]:
        if not self._path.exists():
            raise ValidationError(f"File not found: {self._path}")

        prices: dict[str, Decimal] = {}
        with open(self._path, newline="", encoding="utf-8") as csvfile:
            reader = csv.DictReader(csvfile)
            if reader.fieldnames:
                missing = set(CSV_COLUMNS) - {f.strip() for f in reader.fieldnames}
                if missing:
                    raise ValidationError(f"Missing required columns: {missing}")

            for row in reader:
                row = {(k or "").strip(): v for k, v in row.items()}
                ticker = (row.get("ticker") or "").strip()
                price = parse_decimal(row.get("price"), default=None)
                if not ticker or price is None:
                    logger.debug(f"Skipping incomplete price row: {row}")
                    continue
                prices[ticker] = price

        logger.info(f"Loaded {len(prices)} prices from {self._path}")
        return prices

    def get_current_price(self, instrument_id: str) -> Optional[Decimal]:
        return self._get_prices().get(instrument_id)

    def get_historical_price(self, instrument_id: str, on: date) -> Optional[Decimal]:
        # No history in a static file: the current price stands in
        return self.get_current_price(instrument_id)

    def get_historical_prices(
        self,
        instrument_id: str,
        start: date,
        end: date,
    ) -> dict[date, Decimal]:
        return {}

    def get_current_prices(self, instrument_ids: list[str]) -> dict[str, Decimal]:
        prices = self._get_prices()
        return {i: prices[i] for i in instrument_ids if i in prices}
