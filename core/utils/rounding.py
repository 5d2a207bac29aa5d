"""
Half-up rounding for percentages, averages and money.

Python's ``round`` and format specs round ties to even; dashboard figures
round them up, so 0.25 shows as 0.3 and 0.125 as 0.13.
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def _quantize(value: float, places: int) -> Decimal:
    return Decimal(value).quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def round_to(value: float, places: int = 1) -> float:
    return float(_quantize(value, places))


def format_fixed(value: float, places: int = 1, grouping: bool = False) -> str:
    """
    Render ``value`` with a fixed number of decimals, ties rounded up.

    With ``grouping`` thousands are comma separated, as in ``1,234.50``.
    """
    spec = f",.{places}f" if grouping else f".{places}f"
    return format(_quantize(value, places), spec)
