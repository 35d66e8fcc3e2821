"""Point-in-time positions derived from a transaction log."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from balance_sheet.core.money import ZERO
from balance_sheet.domain.models import (
    InstrumentTrade,
    Transaction,
    TransactionType,
)


def collect_trades(transactions: Iterable[Transaction]) -> list[InstrumentTrade]:
    """Keep only BUY and SELL transactions, preserving order."""
    return [
        txn
        for txn in transactions
        if txn.txn_type in (TransactionType.BUY, TransactionType.SELL)
    ]


def reconstruct_positions(
    transactions: Iterable[Transaction],
    as_of: Optional[date] = None,
) -> dict[str, Decimal]:
    """
    Net quantity per instrument from trades dated on or before `as_of`.

    BUY adds its quantity, SELL subtracts it; cash movements are ignored.
    The log is not modified and the result does not depend on the order
    of trades. Instruments whose trades net to zero stay in the result
    with a zero quantity.
    """
    positions: dict[str, Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        if as_of is not None and txn.date > as_of:
            continue
        if txn.txn_type == TransactionType.BUY:
            positions[txn.instrument_id] += txn.quantity
        elif txn.txn_type == TransactionType.SELL:
            positions[txn.instrument_id] -= txn.quantity
        elif txn.txn_type in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL):
            continue
        else:
            raise TypeError(f"Unknown transaction type: {txn.txn_type}")

    return dict(positions)


def active_positions(
    transactions: Iterable[Transaction],
    as_of: Optional[date] = None,
) -> dict[str, Decimal]:
    """Like reconstruct_positions, without zero quantities."""
    return {
        instrument_id: quantity
        for instrument_id, quantity in reconstruct_positions(transactions, as_of).items()
        if quantity != ZERO
    }
