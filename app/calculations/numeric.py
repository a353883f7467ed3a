"""
Total float arithmetic helpers.

Python raises on some operations IEEE-754 defines a value for (division by
zero, overflowing powers) and returns complex numbers for fractional powers
of negative bases. The calculators must never raise on degenerate inputs,
so they go through these helpers, which return inf/nan instead.
"""

import math


def divide(numerator: float, denominator: float) -> float:
    """Divide, returning +/-inf or nan instead of raising ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def power(base: float, exponent: float) -> float:
    """
    Raise a real base to a real exponent.

    Returns nan where the real result is undefined (negative base with a
    fractional exponent) and +/-inf on overflow or a zero base with a
    negative exponent.
    """
    is_integer = float(exponent).is_integer()

    if base < 0 and not is_integer:
        return math.nan

    # Sign of an infinite result; -0.0 counts as negative
    negative = math.copysign(1.0, base) < 0
    sign = -1.0 if negative and is_integer and int(exponent) % 2 else 1.0

    if base == 0 and exponent < 0:
        return sign * math.inf

    try:
        return float(base**exponent)
    except OverflowError:
        return sign * math.inf
