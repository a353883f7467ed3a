"""
Loan Amortization Calculations

Implements the fixed monthly installment of an annuity loan and the
aggregate totals derived from it. No per-period schedule is produced.
"""

from dataclasses import dataclass

from app.calculations.numeric import divide, power
from app.calculations.rates import monthly_rate


@dataclass(frozen=True)
class LoanSummary:
    """Aggregate figures of a fully amortizing loan."""

    monthly_payment: float
    total_paid: float
    total_interest: float
    months: int


def calculate_payment(principal: float, annual_percent: float, months: int) -> float:
    """
    Calculate monthly loan payment.

    Matches Excel's PMT() function with the sign flipped.

    Args:
        principal: Loan principal amount
        annual_percent: Nominal annual interest rate in percent (e.g., 3.5 for 3.5%)
        months: Number of monthly payments

    Returns:
        Monthly payment amount (0 for a degenerate loan)
    """
    if months <= 0 or principal <= 0:
        return 0.0

    rate = monthly_rate(annual_percent)

    if rate == 0:
        return principal / months

    return divide(principal * rate, 1 - power(1 + rate, -months))


def summarize_loan(principal: float, annual_percent: float, months: int) -> LoanSummary:
    """Calculate payment, total repayment and total interest of a loan."""
    payment = calculate_payment(principal, annual_percent, months)
    total_paid = payment * months

    return LoanSummary(
        monthly_payment=payment,
        total_paid=total_paid,
        total_interest=total_paid - principal,
        months=months,
    )
