"""Decimal helpers for monetary values and ratios."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

MONEY_SCALE = 2
RATIO_SCALE = 4
WEIGHT_SCALE = 6
DIVISION_SCALE = 8

Number = Union[Decimal, int, str]


def _exponent(scale: int) -> Decimal:
    return Decimal(1).scaleb(-scale)


def to_money(value: Number, scale: int = MONEY_SCALE) -> Decimal:
    """Round a value to money scale (ROUND_HALF_UP)."""
    return Decimal(value).quantize(_exponent(scale), rounding=ROUND_HALF_UP)


def to_ratio(value: Number, scale: int = RATIO_SCALE) -> Decimal:
    """Round a ratio to the given scale (ROUND_HALF_UP)."""
    return Decimal(value).quantize(_exponent(scale), rounding=ROUND_HALF_UP)


def divide(numerator: Number, denominator: Number, scale: int = DIVISION_SCALE) -> Decimal:
    """
    Divide two values and round the quotient to `scale` places.

    Raises ZeroDivisionError when the denominator is zero.
    """
    denominator = Decimal(denominator)
    if denominator == ZERO:
        raise ZeroDivisionError("division by zero")
    return to_ratio(Decimal(numerator) / denominator, scale)


def safe_ratio(numerator: Number, denominator: Number, scale: int = RATIO_SCALE) -> Decimal:
    """Divide, returning zero when the denominator is zero."""
    if Decimal(denominator) == ZERO:
        return to_ratio(ZERO, scale)
    return divide(numerator, denominator, scale)


def parse_decimal(value: Optional[str], default: Optional[Decimal] = ZERO) -> Optional[Decimal]:
    """
    Parse a user-entered decimal string.

    Accepts comma or dot as decimal separator and ignores spaces and
    currency symbols. Returns `default` for empty or invalid input.
    """
    if value is None:
        return default
    text = value.strip()
    if not text:
        return default
    normalized = (
        text.replace(" ", "")
        .replace("€", "")
        .replace("$", "")
        .replace(",", ".")
    )
    try:
        result = Decimal(normalized)
    except InvalidOperation:
        return default
    if not result.is_finite():
        return default
    return result
