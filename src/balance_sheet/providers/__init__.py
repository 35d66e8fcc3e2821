"""Price data providers module."""

from balance_sheet.providers.price_source import PriceSource, BasePriceSource
from balance_sheet.providers.csv_source import CsvPriceSource
from balance_sheet.providers.yahoo_source import YahooFinancePriceSource
from balance_sheet.providers.stub_provider import StubPriceSource

__all__ = [
    "PriceSource",
    "BasePriceSource",
    "CsvPriceSource",
    "YahooFinancePriceSource",
    "StubPriceSource",
]
