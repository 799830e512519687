"""Labor cost loading.

This module computes the fully loaded hourly cost of a worker: the base
hourly pay plus burden (payroll taxes, insurance, benefits) expressed as a
percentage.

Burden rules:
- hourly and salaried employees use their own override, or the company
  default when they have none
- subcontractors use their own override, or no burden at all; the company
  default never applies to them
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from estimator.calculators.rate_primitives import (
    HUNDRED,
    ONE,
    ZERO,
    Number,
    quantize_cents,
    to_decimal,
)
from estimator.models.labor import EmploymentType, LaborProfile

logger = logging.getLogger(__name__)

DEFAULT_SALARY_HOURS_PER_YEAR = Decimal("2080")  # 52 weeks × 40 hours


@dataclass
class LoadedCost:
    """Loaded hourly cost of a single crew member.

    Attributes:
        name: Worker name
        employment_type: 'hourly', 'salary' or 'subcontract'
        loaded_rate: Loaded hourly cost rounded to the cent
    """

    name: Optional[str]
    employment_type: EmploymentType
    loaded_rate: Decimal


def resolve_burden_percent(
    profile: LaborProfile, global_burden_percent: Number
) -> Decimal:
    """Return the burden percent that applies to a worker.

    Example:
        >>> sub = LaborProfile(employment_type="subcontract", subcontract_rate=60)
        >>> resolve_burden_percent(sub, 18)
        Decimal('0')
    """
    if profile.burden_percent_override is not None:
        return profile.burden_percent_override
    if profile.employment_type == "subcontract":
        return ZERO
    return to_decimal(global_burden_percent)


def _base_hourly_rate(profile: LaborProfile, salary_hours_per_year: Decimal) -> Decimal:
    # Only the field matching the employment type is ever read
    if profile.employment_type == "hourly":
        return profile.base_rate or ZERO

    if profile.employment_type == "salary":
        if salary_hours_per_year <= ZERO:
            return ZERO
        return (profile.salary_annual or ZERO) / salary_hours_per_year

    return profile.subcontract_rate or ZERO


def compute_loaded_rate(
    profile: LaborProfile,
    global_burden_percent: Number,
    salary_hours_per_year: Number = DEFAULT_SALARY_HOURS_PER_YEAR,
) -> Decimal:
    """Compute a worker's fully loaded hourly cost.

    Formula: base_hourly × (1 + burden / 100), where base_hourly is
    - base_rate for hourly workers
    - salary_annual / salary_hours_per_year for salaried workers
    - subcontract_rate for subcontractors

    A missing or zero rate for the worker's employment type gives 0.

    Args:
        profile: Worker pay structure
        global_burden_percent: Company default burden percent
        salary_hours_per_year: Hours used to convert salaries to hourly

    Returns:
        Loaded hourly cost (>= 0)

    Example:
        >>> worker = LaborProfile(employment_type="hourly", base_rate=30)
        >>> compute_loaded_rate(worker, 20)
        Decimal('36.0')
        >>> sub = LaborProfile(employment_type="subcontract", subcontract_rate=60)
        >>> compute_loaded_rate(sub, 20)
        Decimal('60')
    """
    base_hourly = _base_hourly_rate(profile, to_decimal(salary_hours_per_year))

    if base_hourly <= ZERO:
        logger.debug(
            "No %s rate set for worker %r, loaded rate is 0",
            profile.employment_type,
            profile.name,
        )
        return ZERO

    burden = resolve_burden_percent(profile, global_burden_percent)
    return base_hourly * (ONE + burden / HUNDRED)


def sync_loaded_costs(
    crew: Iterable[LaborProfile],
    global_burden_percent: Number,
    salary_hours_per_year: Number = DEFAULT_SALARY_HOURS_PER_YEAR,
) -> List[LoadedCost]:
    """Compute the loaded cost of every crew member.

    The crew profiles are not modified; a new LoadedCost is returned for
    each worker, in roster order, with the rate rounded to the cent.

    Args:
        crew: Crew roster
        global_burden_percent: Company default burden percent
        salary_hours_per_year: Hours used to convert salaries to hourly

    Returns:
        List of LoadedCost objects
    """
    return [
        LoadedCost(
            name=worker.name,
            employment_type=worker.employment_type,
            loaded_rate=quantize_cents(
                compute_loaded_rate(worker, global_burden_percent, salary_hours_per_year)
            ),
        )
        for worker in crew
    ]


def average_loaded_rate(
    crew: Iterable[LaborProfile],
    global_burden_percent: Number,
    salary_hours_per_year: Number = DEFAULT_SALARY_HOURS_PER_YEAR,
) -> Decimal:
    """Average loaded hourly cost across active crew members.

    The mean is taken over the cent-rounded rates that ``sync_loaded_costs``
    reports, then rounded to the cent. Returns 0 when nobody on the crew is
    active.
    """
    active = [worker for worker in crew if worker.status == "active"]
    if not active:
        return ZERO

    loaded = sync_loaded_costs(active, global_burden_percent, salary_hours_per_year)
    total = sum((cost.loaded_rate for cost in loaded), ZERO)
    return quantize_cents(total / len(loaded))
