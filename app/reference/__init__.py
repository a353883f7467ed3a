"""
Reference data: loan limits, bank rates and asset CAGRs.
"""

from app.reference.tables import (
    LoanType,
    RateEntry,
    LoanLimits,
    ReferenceData,
    UnknownReferenceError,
    find_asset,
    find_bank,
    get_limits,
    get_reference_data,
    init_reference_data,
    update_bank_rate,
    with_bank_rate,
)

__all__ = [
    "LoanType",
    "RateEntry",
    "LoanLimits",
    "ReferenceData",
    "UnknownReferenceError",
    "find_asset",
    "find_bank",
    "get_limits",
    "get_reference_data",
    "init_reference_data",
    "update_bank_rate",
    "with_bank_rate",
]
