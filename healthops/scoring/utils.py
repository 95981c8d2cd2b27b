"""
Decimal Utilities
healthops/scoring/utils.py

Precision-safe decimal math for the tender and capacity calculators.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]

MONEY = Decimal("0.01")
PCT = Decimal("0.0001")


def to_decimal(value: Number) -> Decimal:
    """Convert int/float/Decimal to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def safe_divide(
    numerator: Decimal,
    denominator: Decimal,
    default: Decimal = Decimal("0"),
) -> Decimal:
    """
    Divide with zero-division protection.

    Returns `default` when the denominator is zero, so no NaN or
    ZeroDivisionError ever reaches a result.
    """
    if denominator == 0:
        return default
    return numerator / denominator


def quantize_money(value: Decimal) -> Decimal:
    """Round a currency amount to cents."""
    return value.quantize(MONEY, rounding=ROUND_HALF_UP)


def quantize_pct(value: Decimal) -> Decimal:
    """Round a percentage to four decimal places."""
    return value.quantize(PCT, rounding=ROUND_HALF_UP)
