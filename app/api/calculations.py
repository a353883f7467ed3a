"""
Financial calculation API endpoints.

These endpoints accept calculator inputs and return calculated results.
Numeric fields are parsed leniently so that half-typed form values never
fail a request; they are treated as 0 instead.
"""

import logging
import math
from typing import Annotated, Optional

from fastapi import APIRouter
from pydantic import BaseModel, BeforeValidator

from app.calculations import amortization, calculator, growth
from app.calculations.inputs import (
    parse_lenient_number,
    round_half_up,
    select_rate,
    years_to_months,
)
from app.config import get_settings
from app.reference import (
    LoanType,
    find_asset,
    find_bank,
    get_limits,
    get_reference_data,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LenientNumber = Annotated[float, BeforeValidator(parse_lenient_number)]


def _finite(value: float) -> Optional[float]:
    """Map inf/nan from degenerate inputs to None."""
    return value if math.isfinite(value) else None


class LoanCalculationInput(BaseModel):
    """Input for the full loan calculation."""

    loan_type: LoanType = LoanType.hypo

    # Loan
    amount: LenientNumber = 180000
    years: LenientNumber = 30

    # Rate: either the user's own rate or the selected bank's rate
    use_custom_rate: bool = True
    custom_rate: LenientNumber = 3.5
    bank_id: Optional[str] = None

    # Inflation (defaults to the configured assumption)
    inflation_percent: Optional[LenientNumber] = None

    # Alternative investment; an explicit return overrides the asset's CAGR
    asset_id: Optional[str] = "sp500"
    asset_return_percent: Optional[LenientNumber] = None


class InputsUsed(BaseModel):
    """Inputs after clamping and rate selection."""

    loan_type: LoanType
    principal: float
    years: float
    months: int
    annual_percent: float
    inflation_percent: float
    asset_return_percent: float
    bank_id: Optional[str] = None
    asset_id: Optional[str] = None


class LoanSummaryResponse(BaseModel):
    """Monthly installment and nominal totals."""

    monthly_payment: Optional[float]
    total_paid: Optional[float]
    total_interest: Optional[float]


class RealCostResponse(BaseModel):
    """Repayments in today's money."""

    real_monthly_rate: Optional[float]
    present_value_of_payments: Optional[float]
    real_overpayment: Optional[float]


class InvestmentResponse(BaseModel):
    """Investing the principal instead of borrowing it (nominal)."""

    future_value: Optional[float]
    net_gain_or_loss: Optional[float]
    break_even_rate: Optional[float]


class LoanCalculationResponse(BaseModel):
    """Response with all calculator figures."""

    inputs: InputsUsed
    loan: LoanSummaryResponse
    real_cost: RealCostResponse
    investment: InvestmentResponse


def _loan_response(summary: amortization.LoanSummary) -> LoanSummaryResponse:
    return LoanSummaryResponse(
        monthly_payment=_finite(summary.monthly_payment),
        total_paid=_finite(summary.total_paid),
        total_interest=_finite(summary.total_interest),
    )


def _investment_response(comparison: growth.InvestmentComparison) -> InvestmentResponse:
    return InvestmentResponse(
        future_value=_finite(comparison.future_value),
        net_gain_or_loss=_finite(comparison.net_gain_or_loss),
        break_even_rate=_finite(comparison.break_even_rate),
    )


@router.post("/loan", response_model=LoanCalculationResponse)
async def calculate_loan(inputs: LoanCalculationInput):
    """Calculate payment, totals, real cost and investment comparison."""
    settings = get_settings()
    data = get_reference_data()

    bank = find_bank(data, inputs.loan_type, inputs.bank_id)
    if not inputs.use_custom_rate and bank is None:
        logger.debug(f"No bank '{inputs.bank_id}' for {inputs.loan_type.value}, using 0%")
    annual_percent = select_rate(
        inputs.use_custom_rate, inputs.custom_rate, bank.rate if bank else None
    )

    asset_return = inputs.asset_return_percent
    if asset_return is None:
        asset = find_asset(data, inputs.asset_id)
        if asset is None:
            logger.debug(f"No asset '{inputs.asset_id}', using default return")
            asset_return = settings.default_asset_return_percent
        else:
            asset_return = asset.rate

    inflation = inputs.inflation_percent
    if inflation is None:
        inflation = settings.default_inflation_percent

    result = calculator.calculate(
        calculator.LoanInputs(
            amount=inputs.amount,
            years=inputs.years,
            annual_percent=annual_percent,
            inflation_percent=inflation,
            asset_return_percent=asset_return,
        ),
        limits=get_limits(data, inputs.loan_type),
    )

    return LoanCalculationResponse(
        inputs=InputsUsed(
            loan_type=inputs.loan_type,
            principal=result.principal,
            years=result.years,
            months=result.months,
            annual_percent=result.annual_percent,
            inflation_percent=result.inflation_percent,
            asset_return_percent=result.asset_return_percent,
            bank_id=bank.id if bank else None,
            asset_id=inputs.asset_id,
        ),
        loan=_loan_response(result.loan),
        real_cost=RealCostResponse(
            real_monthly_rate=_finite(result.real_cost.real_monthly_rate),
            present_value_of_payments=_finite(result.real_cost.present_value_of_payments),
            real_overpayment=_finite(result.real_cost.real_overpayment),
        ),
        investment=_investment_response(result.investment),
    )


class PaymentInput(BaseModel):
    """Input for a payment-only calculation."""

    principal: LenientNumber
    annual_percent: LenientNumber = 0.0
    years: LenientNumber = 0.0
    # Overrides years when given
    months: Optional[LenientNumber] = None


class PaymentResponse(LoanSummaryResponse):
    """Payment and totals for the number of months used."""

    months: int


@router.post("/payment", response_model=PaymentResponse)
async def calculate_payment_endpoint(inputs: PaymentInput):
    """Calculate the monthly payment and totals of a loan, without limits."""
    if inputs.months is not None:
        months = round_half_up(inputs.months)
    else:
        months = years_to_months(inputs.years)

    summary = amortization.summarize_loan(inputs.principal, inputs.annual_percent, months)

    return PaymentResponse(
        months=months,
        **_loan_response(summary).model_dump(),
    )


class InvestmentInput(BaseModel):
    """Input for an investment comparison."""

    principal: LenientNumber
    annual_percent: LenientNumber = 0.0
    years: LenientNumber = 0.0
    total_paid: LenientNumber = 0.0


@router.post("/investment", response_model=InvestmentResponse)
async def calculate_investment(inputs: InvestmentInput):
    """Calculate future value, net gain and break-even CAGR."""
    comparison = growth.compare_investment(
        inputs.principal, inputs.annual_percent, inputs.years, inputs.total_paid
    )
    return _investment_response(comparison)
