"""Currency arithmetic helpers.

Monetary values are accumulated as Decimal built from the float's shortest
repr, so an entered price of 10.555 stays 10.555 and not its binary
approximation. Rounding is half-up and happens once, at the end.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

from hanuram_costing.constants import CURRENCY_DECIMAL_PLACES

Number = Union[int, float, Decimal]


def to_decimal(value: Optional[Number]) -> Decimal:
    """
    Convert a number to Decimal, treating None and NaN as zero.

    Args:
        value: int, float, Decimal, or None

    Returns:
        Decimal equal to the value as written
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float) and math.isnan(value):
        return Decimal(0)
    return Decimal(str(value))


def is_number(value: Optional[Number]) -> bool:
    """True for a real amount; None and NaN count as missing."""
    if value is None:
        return False
    return not (isinstance(value, float) and math.isnan(value))


def decimal_sum(values: Iterable[Optional[Number]]) -> Decimal:
    """Sum values exactly, missing values count as zero."""
    total = Decimal(0)
    for value in values:
        total += to_decimal(value)
    return total


def round_currency(value: Optional[Number], places: int = CURRENCY_DECIMAL_PLACES) -> float:
    """
    Round half-up to a fixed number of decimal places.

    Args:
        value: Amount to round
        places: Decimal places to keep (default: 2)

    Returns:
        Rounded amount as float

    Examples:
        >>> round_currency(31.665)
        31.67
        >>> round_currency(None)
        0.0
    """
    quantum = Decimal(1).scaleb(-places)
    return float(to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def safe_divide(
    numerator: Optional[Number],
    denominator: Optional[Number],
    places: int = CURRENCY_DECIMAL_PLACES
) -> float:
    """
    Divide and round, returning 0 when the denominator is not positive.

    Cost screens always display a number, so a missing or zero divisor
    yields zero rather than an exception, NaN, or infinity.
    """
    divisor = to_decimal(denominator)
    if divisor <= 0:
        return 0.0
    return round_currency(to_decimal(numerator) / divisor, places)
