"""
Unit tests for point-in-time position reconstruction.

Tests cover:
- Buys and sells netting per instrument
- Filtering by as-of date (inclusive)
- Cash movements being ignored
- Order independence and zero positions
"""

from datetime import date
from decimal import Decimal

from balance_sheet.services import active_positions, collect_trades, reconstruct_positions

from tests.conftest import buy, deposit, sell, withdrawal


class TestReconstructPositions:
    """Tests for reconstruct_positions."""

    def test_buys_and_sells_net_per_instrument(self):
        """
        GIVEN buys of 10 and 5 VWCE.DE and a sell of 3
        WHEN positions are reconstructed
        THEN VWCE.DE nets to 12
        """
        transactions = [
            buy(date(2024, 1, 1), "VWCE.DE", "10", "100"),
            buy(date(2024, 2, 1), "VWCE.DE", "5", "105"),
            sell(date(2024, 3, 1), "VWCE.DE", "3", "110"),
            buy(date(2024, 3, 1), "SWDA.MI", "2.5", "90"),
        ]

        positions = reconstruct_positions(transactions)

        assert positions == {"VWCE.DE": Decimal("12"), "SWDA.MI": Decimal("2.5")}

    def test_as_of_is_inclusive(self):
        transactions = [
            buy(date(2024, 1, 1), "VWCE.DE", "10", "100"),
            buy(date(2024, 2, 1), "VWCE.DE", "5", "105"),
        ]

        assert reconstruct_positions(transactions, date(2024, 1, 31)) == {
            "VWCE.DE": Decimal("10")
        }
        assert reconstruct_positions(transactions, date(2024, 2, 1)) == {
            "VWCE.DE": Decimal("15")
        }

    def test_before_first_trade_is_empty(self):
        transactions = [buy(date(2024, 1, 1), "VWCE.DE", "10", "100")]

        assert reconstruct_positions(transactions, date(2023, 12, 31)) == {}

    def test_cash_movements_are_ignored(self):
        transactions = [
            deposit(date(2024, 1, 1), "1000"),
            buy(date(2024, 1, 2), "VWCE.DE", "1", "100"),
            withdrawal(date(2024, 1, 3), "50"),
        ]

        assert reconstruct_positions(transactions) == {"VWCE.DE": Decimal("1")}

    def test_order_does_not_matter(self):
        transactions = [
            sell(date(2024, 3, 1), "VWCE.DE", "3", "110"),
            buy(date(2024, 1, 1), "VWCE.DE", "10", "100"),
        ]

        assert reconstruct_positions(transactions) == reconstruct_positions(
            list(reversed(transactions))
        )

    def test_input_is_not_modified(self):
        transactions = [buy(date(2024, 1, 1), "VWCE.DE", "10", "100")]
        snapshot = list(transactions)

        reconstruct_positions(transactions)

        assert transactions == snapshot

    def test_closed_position_kept_with_zero(self):
        """
        GIVEN a buy of 4 and a sell of 4
        WHEN positions are reconstructed
        THEN the instrument is present with quantity 0
        AND active_positions drops it
        """
        transactions = [
            buy(date(2024, 1, 1), "VWCE.DE", "4", "100"),
            sell(date(2024, 2, 1), "VWCE.DE", "4", "120"),
        ]

        assert reconstruct_positions(transactions) == {"VWCE.DE": Decimal("0")}
        assert active_positions(transactions) == {}


class TestCollectTrades:
    """Tests for collect_trades."""

    def test_keeps_trades_in_order(self):
        first = buy(date(2024, 1, 1), "VWCE.DE", "1", "100")
        second = sell(date(2024, 1, 5), "VWCE.DE", "1", "101")
        transactions = [deposit(date(2023, 12, 31), "500"), first, second]

        assert collect_trades(transactions) == [first, second]
