"""
Loan Calculator

Runs the full calculation for one set of inputs:

    inputs -> clamp to limits -> payment -> total paid / total interest
                              -> real monthly rate -> PV of payments -> real overpayment
                              -> future value of principal -> net gain, break-even CAGR

Two comparison bases are reported side by side and deliberately not
reconciled: the real overpayment discounts the payments for inflation,
while the investment comparison and break-even CAGR use the nominal
total paid.
"""

from dataclasses import dataclass
from typing import Optional

from app.calculations.amortization import LoanSummary, summarize_loan
from app.calculations.discounting import RealCost, calculate_real_cost
from app.calculations.growth import InvestmentComparison, compare_investment
from app.calculations.inputs import clamp, years_to_months
from app.reference.tables import LoanLimits


@dataclass(frozen=True)
class LoanInputs:
    """Numeric calculator inputs, already coerced to floats."""

    amount: float
    years: float
    annual_percent: float
    inflation_percent: float = 0.0
    asset_return_percent: float = 0.0


@dataclass(frozen=True)
class CalculationResult:
    """Inputs actually used and every figure derived from them."""

    principal: float
    years: float
    months: int
    annual_percent: float
    inflation_percent: float
    asset_return_percent: float
    loan: LoanSummary
    real_cost: RealCost
    investment: InvestmentComparison


def calculate(inputs: LoanInputs, limits: Optional[LoanLimits] = None) -> CalculationResult:
    """
    Calculate loan totals, real cost and investment comparison.

    Args:
        inputs: Calculator inputs
        limits: Range the amount and term are clamped to (no clamping if None)

    Returns:
        CalculationResult with the clamped inputs and all derived figures
    """
    principal = inputs.amount
    years = inputs.years

    if limits is not None:
        principal = clamp(principal, limits.amount.min, limits.amount.max)
        years = clamp(years, limits.years.min, limits.years.max)

    months = years_to_months(years)

    loan = summarize_loan(principal, inputs.annual_percent, months)
    real_cost = calculate_real_cost(
        principal,
        loan.monthly_payment,
        inputs.annual_percent,
        inputs.inflation_percent,
        months,
    )
    investment = compare_investment(
        principal, inputs.asset_return_percent, years, loan.total_paid
    )

    return CalculationResult(
        principal=principal,
        years=years,
        months=months,
        annual_percent=inputs.annual_percent,
        inflation_percent=inputs.inflation_percent,
        asset_return_percent=inputs.asset_return_percent,
        loan=loan,
        real_cost=real_cost,
        investment=investment,
    )
