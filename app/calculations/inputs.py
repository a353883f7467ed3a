"""
Input normalization for the calculators.

Form inputs arrive half-typed while the user is still editing them. They are
coerced to plain floats here, before they reach the financial formulas,
which never coerce anything themselves.
"""

import math
from typing import Any, Optional

from app.calculations.rates import MONTHS_PER_YEAR


def parse_lenient_number(value: Any) -> float:
    """
    Coerce a raw input to a float, treating anything unusable as 0.

    Accepts numbers and numeric strings (surrounding whitespace is
    tolerated). None, empty or non-numeric strings, nan and
    infinities all become 0.0.
    """
    if value is None:
        return 0.0

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(number):
        return 0.0
    return number


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit a value to the closed range [lower, upper]."""
    return min(max(value, lower), upper)


def round_half_up(value: float) -> int:
    """Round a finite number to the nearest integer, rounding halves up."""
    return math.floor(value + 0.5)


def years_to_months(years: float) -> int:
    """
    Convert a loan term in years to a whole number of monthly payments.

    Rounds half up and never returns fewer than one month. A term too
    large to count in months is treated like a missing one.
    """
    months = years * MONTHS_PER_YEAR
    if not math.isfinite(months):
        return 1
    return max(1, round_half_up(months))


def select_rate(
    use_custom_rate: bool, custom_rate: float, bank_rate: Optional[float]
) -> float:
    """
    Pick the annual rate a calculation runs with.

    Args:
        use_custom_rate: Whether the user typed their own rate
        custom_rate: The user's rate in percent
        bank_rate: Rate of the selected bank in percent, None if no bank matched

    Returns:
        Effective annual rate in percent
    """
    if use_custom_rate:
        return custom_rate
    if bank_rate is None:
        return 0.0
    return bank_rate
