"""
Investment Growth Calculations

Compounds a lump sum forward at an asset's CAGR and solves the CAGR at
which investing the principal would match the total repaid on a loan.

The comparison is nominal: it uses the undiscounted total paid, unlike
the real overpayment in app.calculations.discounting.
"""

from dataclasses import dataclass

from app.calculations.numeric import power


@dataclass(frozen=True)
class InvestmentComparison:
    """Outcome of investing the principal instead of borrowing it."""

    future_value: float
    net_gain_or_loss: float
    break_even_rate: float


def future_value(principal: float, annual_percent: float, years: float) -> float:
    """
    Calculate the future value of a lump sum with annual compounding.

    Args:
        principal: Amount invested today
        annual_percent: Annual growth rate in percent (e.g., 10 for 10%)
        years: Investment horizon in years (may be fractional)

    Returns:
        Value of the investment after the given number of years
    """
    return principal * power(1 + annual_percent / 100, years)


def break_even_rate(total_paid: float, principal: float, years: float) -> float:
    """
    Calculate the break-even CAGR of a loan.

    This is the constant annual growth rate at which investing the principal
    today grows to exactly the total paid on the loan after the given number
    of years. A total below the principal gives a negative rate.

    Args:
        total_paid: Total nominal amount repaid on the loan
        principal: Loan principal amount
        years: Loan term in years

    Returns:
        Break-even annual rate in percent (0 if principal or years is not positive)
    """
    if principal <= 0 or years <= 0:
        return 0.0

    growth_multiple = total_paid / principal
    return (power(growth_multiple, 1 / years) - 1) * 100


def compare_investment(
    principal: float, annual_percent: float, years: float, total_paid: float
) -> InvestmentComparison:
    """Compare investing the principal in an asset against repaying the loan."""
    value = future_value(principal, annual_percent, years)

    return InvestmentComparison(
        future_value=value,
        net_gain_or_loss=value - total_paid,
        break_even_rate=break_even_rate(total_paid, principal, years),
    )
