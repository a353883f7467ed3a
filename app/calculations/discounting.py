"""
Present Value Calculations

Discounts a stream of equal monthly payments back to today, and measures
the real (inflation-adjusted) cost of a loan against its principal.
"""

from dataclasses import dataclass

from app.calculations.numeric import divide, power
from app.calculations.rates import real_monthly_rate

# Rates closer to zero than this are treated as exactly zero
ZERO_RATE_EPSILON = 1e-12


@dataclass(frozen=True)
class RealCost:
    """Loan repayments expressed in today's money."""

    real_monthly_rate: float
    present_value_of_payments: float
    real_overpayment: float


def present_value_of_annuity(payment: float, rate: float, months: int) -> float:
    """
    Calculate the present value of N equal monthly payments.

    Matches Excel's PV() function with the sign flipped. A negative rate
    (inflation above the nominal rate) is valid and yields a present value
    above the undiscounted sum.

    Args:
        payment: Monthly payment amount
        rate: Monthly discount rate as decimal
        months: Number of monthly payments

    Returns:
        Present value of the payment stream
    """
    if months <= 0:
        return 0.0

    if abs(rate) < ZERO_RATE_EPSILON:
        return payment * months

    return divide(payment * (1 - power(1 + rate, -months)), rate)


def calculate_real_cost(
    principal: float,
    payment: float,
    nominal_annual_percent: float,
    inflation_annual_percent: float,
    months: int,
) -> RealCost:
    """
    Calculate what a loan's repayments are worth in today's money.

    The payments are discounted at the real monthly rate, so the overpayment
    is the inflation-adjusted net cost of borrowing compared with holding
    the principal in cash today.

    Args:
        principal: Loan principal amount
        payment: Monthly loan payment
        nominal_annual_percent: Loan's nominal annual rate in percent
        inflation_annual_percent: Annual inflation rate in percent
        months: Number of monthly payments

    Returns:
        RealCost with the discount rate, present value and real overpayment
    """
    rate = real_monthly_rate(nominal_annual_percent, inflation_annual_percent)
    present_value = present_value_of_annuity(payment, rate, months)

    return RealCost(
        real_monthly_rate=rate,
        present_value_of_payments=present_value,
        real_overpayment=present_value - principal,
    )
