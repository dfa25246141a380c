"""Utility functions for Projects Manager."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

#: The precision every hours value is stored with.
HOURS_QUANTUM: Final[Decimal] = Decimal("0.01")
#: Hours must stay below this to fit the NUMERIC(7, 2) columns.
HOURS_LIMIT: Final[Decimal] = Decimal(10) ** 5


def to_hours(value: Decimal | float | str | None) -> Decimal | None:
    """
    Convert a value to a number of hours with exactly two fractional digits.

    Args:
        value: Decimal, number or numeric string, or None

    Returns:
        Decimal rounded half-up to two places, or None

    """
    if value is None:
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)
