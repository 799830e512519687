"""Overhead allocation for estimate pricing.

This module derives how much of the company's fixed overhead a job should
recover. Three allocation methods are supported:
- per-billable-hour: an hourly rate (fixed budget / effective billable
  hours) charged on every labor hour of the job
- percent-of-labor: a percentage of the job's raw labor cost
- percent-of-revenue: a percentage of the job's direct cost, standing in
  for revenue before the job is priced

Only the per-billable-hour method has an hourly rate. For the two percent
methods ``compute_overhead_rate`` returns 0 and the recovery is computed
from the job's costs by ``compute_overhead_recovered``.
"""

import logging
from decimal import Decimal

from estimator.calculators.rate_primitives import HUNDRED, ZERO, to_decimal
from estimator.models.costs import CostBreakdown
from estimator.models.overhead import OverheadConfig

logger = logging.getLogger(__name__)


def compute_total_monthly_overhead(config: OverheadConfig) -> Decimal:
    """Sum the fixed expense categories into the monthly overhead budget.

    Example:
        >>> config = OverheadConfig(fixed_categories=[
        ...     {"name": "Yard lease", "amount": 6000},
        ...     {"name": "Insurance", "amount": 2500},
        ... ])
        >>> compute_total_monthly_overhead(config)
        Decimal('8500')
    """
    return sum((category.amount for category in config.fixed_categories), ZERO)


def compute_effective_billable_hours(config: OverheadConfig) -> Decimal:
    """Expected billable hours scaled by utilization.

    Formula: expected_billable_hours_per_period × utilization_percent / 100
    """
    return config.expected_billable_hours_per_period * (
        config.utilization_percent / HUNDRED
    )


def compute_overhead_rate(config: OverheadConfig) -> Decimal:
    """Compute the hourly overhead recovery rate.

    Formula (per-billable-hour): fixed_total / effective_hours

    The rate is 0 when there are no effective billable hours. It is also 0
    for the percent-of-labor and percent-of-revenue methods, which have no
    hourly rate; callers must not read it as one under those methods.

    Args:
        config: Overhead configuration

    Returns:
        Hourly overhead rate (>= 0)

    Example:
        >>> config = OverheadConfig(
        ...     fixed_categories=[{"name": "Overhead", "amount": 8500}],
        ...     expected_billable_hours_per_period=160,
        ...     utilization_percent=100,
        ... )
        >>> compute_overhead_rate(config)
        Decimal('53.125')
    """
    if config.allocation_method != "per-billable-hour":
        return ZERO

    fixed_total = compute_total_monthly_overhead(config)
    effective_hours = compute_effective_billable_hours(config)

    if effective_hours <= ZERO:
        logger.debug("No effective billable hours, overhead rate is 0")
        return ZERO

    return fixed_total / effective_hours


def compute_overhead_recovered(
    costs: CostBreakdown, config: OverheadConfig, overhead_rate: Decimal
) -> Decimal:
    """Compute the overhead recovered on a single job.

    - per-billable-hour: labor_hours × overhead_rate
    - percent-of-labor: labor_cost_raw × overhead_percent / 100
    - percent-of-revenue: direct cost × overhead_percent / 100

    Args:
        costs: Job cost breakdown
        config: Overhead configuration
        overhead_rate: Rate from ``compute_overhead_rate``

    Returns:
        Overhead amount recovered by the job
    """
    if config.allocation_method == "per-billable-hour":
        return costs.labor_hours * to_decimal(overhead_rate)

    share = config.overhead_percent / HUNDRED

    if config.allocation_method == "percent-of-labor":
        return costs.labor_cost_raw * share

    return costs.direct_cost * share
