"""
Rate Conversions

Converts annual percentage rates into the monthly rates used by the
annuity and discounting formulas, and strips inflation from a nominal
rate with the Fisher relation.
"""

from app.calculations.numeric import divide

MONTHS_PER_YEAR = 12


def monthly_rate(annual_percent: float) -> float:
    """
    Convert an annual percentage rate to a monthly rate.

    Args:
        annual_percent: Annual rate in percent (e.g., 3.5 for 3.5%)

    Returns:
        Monthly rate as decimal (e.g., 0.0029167 for 3.5%)
    """
    return (annual_percent / 100) / MONTHS_PER_YEAR


def real_monthly_rate(
    nominal_annual_percent: float, inflation_annual_percent: float
) -> float:
    """
    Calculate the real (inflation-adjusted) monthly discount rate.

    Applies the multiplicative Fisher relation to the monthly rates:
    (1 + nominal) = (1 + real) * (1 + inflation). The result is negative
    when inflation exceeds the nominal rate.

    Args:
        nominal_annual_percent: Nominal annual interest rate in percent
        inflation_annual_percent: Annual inflation rate in percent

    Returns:
        Real monthly rate as decimal
    """
    nominal = monthly_rate(nominal_annual_percent)
    inflation = monthly_rate(inflation_annual_percent)
    return divide(1 + nominal, 1 + inflation) - 1
