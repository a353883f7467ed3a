"""
Reference tables: input limits, bank rates and asset CAGRs.

The tables are static lookup data loaded once at startup. They are never
mutated in place: an update builds a new ReferenceData and the current
tables are swapped as a whole, so a request always sees one consistent
snapshot.
"""

import enum
import logging
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from app.reference.defaults import DEFAULT_ASSETS, DEFAULT_BANKS, DEFAULT_LIMITS

logger = logging.getLogger(__name__)


class LoanType(str, enum.Enum):
    """Loan product; selects which limits and bank list apply."""

    hypo = "hypo"
    nehypo = "nehypo"


class UnknownReferenceError(KeyError):
    """Raised when a loan type, bank or asset is not in the reference tables."""


@dataclass(frozen=True)
class RateEntry:
    """A named annual rate in percent: a bank's loan rate or an asset's CAGR."""

    id: str
    name: str
    rate: float


@dataclass(frozen=True)
class Bound:
    min: float
    max: float
    step: float


@dataclass(frozen=True)
class LoanLimits:
    """Allowed principal and term range for one loan type."""

    amount: Bound
    years: Bound


@dataclass(frozen=True)
class ReferenceData:
    """Snapshot of all reference tables."""

    limits: Mapping[LoanType, LoanLimits]
    banks: Mapping[LoanType, Mapping[str, RateEntry]]
    assets: Mapping[str, RateEntry]


# -----------------------------------------------------------------------------
# File schema
# -----------------------------------------------------------------------------


class BoundSchema(BaseModel):
    min: float
    max: float
    step: float = 1


class LoanLimitsSchema(BaseModel):
    amount: BoundSchema
    years: BoundSchema


class RateEntrySchema(BaseModel):
    id: str
    name: str
    rate: float


class ReferenceFile(BaseModel):
    """
    Reference data as stored in JSON.

    Any table left out falls back to the built-in defaults.
    """

    model_config = ConfigDict(validate_default=True)

    limits: Dict[LoanType, LoanLimitsSchema] = DEFAULT_LIMITS
    banks: Dict[LoanType, List[RateEntrySchema]] = DEFAULT_BANKS
    assets: List[RateEntrySchema] = DEFAULT_ASSETS


def _freeze_entries(entries: List[RateEntrySchema]) -> Mapping[str, RateEntry]:
    return MappingProxyType(
        {entry.id: RateEntry(id=entry.id, name=entry.name, rate=entry.rate) for entry in entries}
    )


def _freeze_bound(bound: BoundSchema) -> Bound:
    return Bound(min=bound.min, max=bound.max, step=bound.step)


def build_reference_data(source: ReferenceFile) -> ReferenceData:
    """
    Convert validated reference tables into an immutable snapshot.

    Raises:
        ValueError: If a loan type has no limits or no bank list
    """
    for loan_type in LoanType:
        if loan_type not in source.limits:
            raise ValueError(f"No limits defined for loan type '{loan_type.value}'")
        if loan_type not in source.banks:
            raise ValueError(f"No banks defined for loan type '{loan_type.value}'")

    limits = {
        loan_type: LoanLimits(
            amount=_freeze_bound(entry.amount), years=_freeze_bound(entry.years)
        )
        for loan_type, entry in source.limits.items()
    }
    banks = {
        loan_type: _freeze_entries(entries) for loan_type, entries in source.banks.items()
    }

    return ReferenceData(
        limits=MappingProxyType(limits),
        banks=MappingProxyType(banks),
        assets=_freeze_entries(source.assets),
    )


def default_reference_data() -> ReferenceData:
    """Build the snapshot of the built-in tables."""
    return build_reference_data(ReferenceFile())


def load_reference_data(path: Union[str, Path]) -> ReferenceData:
    """
    Load reference tables from a JSON file.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the file does not match the schema
        ValueError: If a loan type is missing
    """
    raw = Path(path).read_text(encoding="utf-8")
    return build_reference_data(ReferenceFile.model_validate_json(raw))


# -----------------------------------------------------------------------------
# Lookups and updates
# -----------------------------------------------------------------------------


def _loan_type(value: Union[LoanType, str]) -> LoanType:
    try:
        return LoanType(value)
    except ValueError:
        raise UnknownReferenceError(f"Unknown loan type '{value}'")


def _bank_table(data: ReferenceData, loan_type: LoanType) -> Mapping[str, RateEntry]:
    if loan_type not in data.banks:
        raise UnknownReferenceError(f"No banks for loan type '{loan_type.value}'")
    return data.banks[loan_type]


def find_bank(
    data: ReferenceData, loan_type: Union[LoanType, str], bank_id: Optional[str]
) -> Optional[RateEntry]:
    """Look up a bank in a loan type's list, None if there is no such bank."""
    if not bank_id:
        return None
    return _bank_table(data, _loan_type(loan_type)).get(bank_id)


def find_asset(data: ReferenceData, asset_id: Optional[str]) -> Optional[RateEntry]:
    """Look up an asset, None if there is no such asset."""
    if not asset_id:
        return None
    return data.assets.get(asset_id)


def get_limits(data: ReferenceData, loan_type: Union[LoanType, str]) -> LoanLimits:
    """Get the input limits of a loan type."""
    loan_type = _loan_type(loan_type)
    if loan_type not in data.limits:
        raise UnknownReferenceError(f"No limits for loan type '{loan_type.value}'")
    return data.limits[loan_type]


def with_bank_rate(
    data: ReferenceData, loan_type: Union[LoanType, str], bank_id: str, rate: float
) -> ReferenceData:
    """
    Return a copy of the tables with one bank's rate changed.

    The given snapshot is left untouched.

    Raises:
        UnknownReferenceError: If the loan type or bank does not exist
    """
    loan_type = _loan_type(loan_type)
    banks = _bank_table(data, loan_type)
    if bank_id not in banks:
        raise UnknownReferenceError(
            f"Unknown bank '{bank_id}' for loan type '{loan_type.value}'"
        )

    updated_banks = dict(banks)
    updated_banks[bank_id] = replace(banks[bank_id], rate=rate)

    all_banks = dict(data.banks)
    all_banks[loan_type] = MappingProxyType(updated_banks)

    return replace(data, banks=MappingProxyType(all_banks))


# -----------------------------------------------------------------------------
# Current tables
# -----------------------------------------------------------------------------

_current: Optional[ReferenceData] = None
_update_lock = threading.Lock()


def get_reference_data() -> ReferenceData:
    """Get the current reference tables, building the defaults on first use."""
    global _current
    if _current is None:
        _current = default_reference_data()
    return _current


def set_reference_data(data: ReferenceData) -> None:
    """Replace the current reference tables."""
    global _current
    _current = data


def init_reference_data(path: Optional[str] = None) -> ReferenceData:
    """Load the reference tables at startup, from a file if one is configured."""
    if path:
        data = load_reference_data(path)
        logger.info(f"Loaded reference data from {path}")
    else:
        data = default_reference_data()
        logger.info("Using built-in reference data")

    set_reference_data(data)
    return data


def update_bank_rate(
    loan_type: Union[LoanType, str], bank_id: str, rate: float
) -> ReferenceData:
    """Change one bank's rate in the current tables and return the new tables."""
    with _update_lock:
        data = with_bank_rate(get_reference_data(), loan_type, bank_id, rate)
        set_reference_data(data)

    logger.info(f"Updated rate of bank '{bank_id}' ({_loan_type(loan_type).value}) to {rate}%")
    return data
