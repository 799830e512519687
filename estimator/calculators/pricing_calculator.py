"""Estimate pricing pipeline.

This module turns a job's raw cost breakdown into a client-facing price:

1. Overhead recovery (hourly rate × labor hours, or a percentage)
2. Recovered overhead optionally folded into the labor cost base
3. Markup per cost category, or pricing to a target gross margin
4. Contingency on the priced subtotal
5. Rounding of the subtotal
6. Tax over the taxable cost categories

Tax is computed on the pre-markup category costs (labor including any
folded-in overhead), not on the marked-up subtotal. Quotes produced by the
back office have always been taxed this way and must keep matching.

The pipeline never raises for zero or empty inputs: a zeroed cost breakdown
prices to zero.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from estimator.calculators.overhead_calculator import (
    compute_overhead_rate,
    compute_overhead_recovered,
)
from estimator.calculators.rate_primitives import (
    ZERO,
    Number,
    apply_markup,
    apply_rounding,
    category_totals,
    compute_tax,
    price_from_margin,
    taxable_basis,
)
from estimator.models.costs import CostBreakdown
from estimator.models.overhead import OverheadConfig
from estimator.models.pricing import MarginStrategy, MarkupStrategy, PricingStrategy
from estimator.models.profile import PricingProfile
from estimator.models.tax import TaxRules

logger = logging.getLogger(__name__)


@dataclass
class EstimatePrice:
    """Priced estimate.

    Attributes:
        subtotal: Price after markup/margin, contingency and rounding
        tax: Tax amount (0 when tax is disabled)
        total: subtotal + tax
        overhead_recovered: Overhead recovered by the job
        overhead_rate: Hourly overhead rate (0 outside per-billable-hour)
        labor_with_overhead: Labor cost base used for pricing
        subtotal_before_contingency: Subtotal after markup/margin only
        taxable_basis: Sum of the taxable pre-markup categories

    Example:
        >>> price = EstimatePrice(
        ...     subtotal=Decimal("2879"),
        ...     tax=Decimal("0"),
        ...     total=Decimal("2879"),
        ...     overhead_recovered=Decimal("531.25"),
        ... )
        >>> price.total
        Decimal('2879')
    """

    subtotal: Decimal
    tax: Decimal
    total: Decimal
    overhead_recovered: Decimal
    overhead_rate: Decimal = ZERO
    labor_with_overhead: Decimal = ZERO
    subtotal_before_contingency: Decimal = ZERO
    taxable_basis: Decimal = ZERO


def _price_with_markup(
    costs: CostBreakdown, labor_with_overhead: Decimal, strategy: MarkupStrategy
) -> Decimal:
    # Logistics is passed through without markup
    return (
        apply_markup(labor_with_overhead, strategy.markup_labor_percent)
        + apply_markup(costs.materials, strategy.markup_materials_percent)
        + apply_markup(costs.subs, strategy.markup_sub_percent)
        + apply_markup(costs.equipment, strategy.markup_equipment_percent)
        + costs.logistics
    )


def _price_with_margin(
    costs: CostBreakdown, labor_with_overhead: Decimal, strategy: MarginStrategy
) -> Decimal:
    total_cost = (
        labor_with_overhead
        + costs.materials
        + costs.subs
        + costs.equipment
        + costs.logistics
    )
    return price_from_margin(total_cost, strategy.target_gross_margin_percent)


def compute_estimate_price(
    costs: CostBreakdown,
    overhead_config: OverheadConfig,
    pricing_strategy: PricingStrategy,
    tax_rules: TaxRules,
    total_rounding: Optional[Number] = "none",
) -> EstimatePrice:
    """Price an estimate from its raw costs.

    Args:
        costs: Raw job costs
        overhead_config: Overhead recovery configuration
        pricing_strategy: Markup or margin strategy
        tax_rules: Tax configuration
        total_rounding: Rounding rule for the subtotal ('none', '5',
            'nearest_1', ...)

    Returns:
        EstimatePrice with subtotal, tax, total and overhead recovered

    Example:
        >>> costs = CostBreakdown(
        ...     materials=1000, labor_hours=10, labor_cost_raw=500, logistics=50
        ... )
        >>> overhead = OverheadConfig(
        ...     fixed_categories=[{"name": "Overhead", "amount": 8500}],
        ...     expected_billable_hours_per_period=160,
        ...     utilization_percent=100,
        ... )
        >>> strategy = MarkupStrategy(
        ...     markup_labor_percent=35,
        ...     markup_materials_percent=30,
        ...     contingency_percent=5,
        ... )
        >>> price = compute_estimate_price(
        ...     costs, overhead, strategy, TaxRules(enabled=False), "nearest_1"
        ... )
        >>> price.total
        Decimal('2879')
    """
    overhead_rate = compute_overhead_rate(overhead_config)
    overhead_recovered = compute_overhead_recovered(
        costs, overhead_config, overhead_rate
    )

    labor_with_overhead = costs.labor_cost_raw
    if pricing_strategy.include_overhead_in_cost:
        labor_with_overhead += overhead_recovered

    if pricing_strategy.mode == "markup":
        subtotal = _price_with_markup(costs, labor_with_overhead, pricing_strategy)
    else:
        subtotal = _price_with_margin(costs, labor_with_overhead, pricing_strategy)

    subtotal_before_contingency = subtotal
    subtotal = apply_markup(subtotal, pricing_strategy.contingency_percent)
    subtotal = apply_rounding(subtotal, total_rounding)

    basis = taxable_basis(
        category_totals(
            materials=costs.materials,
            labor=labor_with_overhead,
            subs=costs.subs,
            equipment=costs.equipment,
            logistics=costs.logistics,
        ),
        tax_rules.tax_applies_to.flags(),
    )

    if tax_rules.enabled:
        tax = compute_tax(basis, tax_rules.tax_rate_percent, tax_rules.tax_rounding_rule)
    else:
        tax = ZERO

    logger.debug(
        "Priced estimate: mode=%s subtotal=%s tax=%s overhead_recovered=%s",
        pricing_strategy.mode,
        subtotal,
        tax,
        overhead_recovered,
    )

    return EstimatePrice(
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
        overhead_recovered=overhead_recovered,
        overhead_rate=overhead_rate,
        labor_with_overhead=labor_with_overhead,
        subtotal_before_contingency=subtotal_before_contingency,
        taxable_basis=basis,
    )


def compute_estimate_price_for_profile(
    costs: CostBreakdown, profile: PricingProfile
) -> EstimatePrice:
    """Price an estimate using every setting of a pricing profile.

    Example:
        >>> compute_estimate_price_for_profile(CostBreakdown(), PricingProfile()).total == 0
        True
    """
    return compute_estimate_price(
        costs,
        profile.overhead,
        profile.pricing_strategy,
        profile.tax_rules,
        profile.total_rounding,
    )
