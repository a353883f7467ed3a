"""
Reference data API endpoints.

Serves the loan limits, bank rates and asset CAGRs the calculator form is
built from, and lets an operator change a bank's rate.
"""

from typing import Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.api.calculations import LenientNumber
from app.reference import LoanType, UnknownReferenceError, get_reference_data, update_bank_rate
from app.reference.tables import BoundSchema, LoanLimitsSchema, RateEntrySchema

router = APIRouter()


def _rate_entries(entries) -> List[RateEntrySchema]:
    return [RateEntrySchema(id=entry.id, name=entry.name, rate=entry.rate) for entry in entries]


def _bound(bound) -> BoundSchema:
    return BoundSchema(min=bound.min, max=bound.max, step=bound.step)


@router.get("/limits", response_model=Dict[LoanType, LoanLimitsSchema])
async def list_limits():
    """Get the amount and term limits of every loan type."""
    data = get_reference_data()
    return {
        loan_type: LoanLimitsSchema(amount=_bound(limits.amount), years=_bound(limits.years))
        for loan_type, limits in data.limits.items()
    }


@router.get("/banks/{loan_type}", response_model=List[RateEntrySchema])
async def list_banks(loan_type: LoanType):
    """Get the banks and their rates for a loan type."""
    data = get_reference_data()
    return _rate_entries(data.banks[loan_type].values())


@router.get("/assets", response_model=List[RateEntrySchema])
async def list_assets():
    """Get the reference assets and their CAGRs."""
    return _rate_entries(get_reference_data().assets.values())


class BankRateUpdate(BaseModel):
    """New annual rate of a bank, in percent."""

    rate: LenientNumber


@router.put("/banks/{loan_type}/{bank_id}", response_model=List[RateEntrySchema])
async def update_bank(loan_type: LoanType, bank_id: str, update: BankRateUpdate):
    """Change a bank's rate. Returns the loan type's updated bank list."""
    try:
        data = update_bank_rate(loan_type, bank_id, update.rate)
    except UnknownReferenceError as e:
        raise HTTPException(status_code=404, detail=e.args[0])

    return _rate_entries(data.banks[loan_type].values())
