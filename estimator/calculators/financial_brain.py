"""Financial Brain computations.

The settings dashboard summarizes the company's financial setup in two
numbers:
- overhead per billable hour
- recommended labor cost multiplier: the factor to apply to a raw wage to
  cover burden and hit the markup or margin target

Formula (multiplier):
    burden_mult = 1 + burden% / 100
    target_margin: burden_mult / (1 - margin% / 100)
    markup:        burden_mult × (1 + markup% / 100)

The same settings also imply a full pricing profile
(``pricing_profile_from_brain``), so a company that only filled in the
dashboard can still price estimates.
"""

from dataclasses import dataclass
from decimal import Decimal

from estimator.calculators.rate_primitives import (
    HUNDRED,
    ONE,
    ZERO,
    apply_markup,
    price_from_margin,
    quantize_cents,
)
from estimator.models.financial_brain import FinancialBrain
from estimator.models.labor import LaborSettings
from estimator.models.overhead import OverheadConfig
from estimator.models.pricing import MarginStrategy, MarkupStrategy
from estimator.models.profile import PricingProfile
from estimator.models.tax import TaxRules

# Used when a dashboard percentage is missing or zero
DEFAULT_MARKUP_PERCENT = Decimal("35")
DEFAULT_TARGET_MARGIN_PERCENT = Decimal("35")
DEFAULT_CONTINGENCY_PERCENT = Decimal("5")


@dataclass
class FinancialBrainSummary:
    """Computed Financial Brain figures, rounded to 2 decimals.

    Attributes:
        overhead_per_billable_hour: Hourly overhead rate
        recommended_labor_cost_multiplier: Multiplier for raw labor cost
    """

    overhead_per_billable_hour: Decimal
    recommended_labor_cost_multiplier: Decimal


def compute_brain_overhead_rate(brain: FinancialBrain) -> Decimal:
    """Overhead per billable hour from the dashboard settings.

    Missing billable hours (None or 0) count as one hour, so the monthly
    budget is never divided by zero.
    """
    if brain.overhead_mode == "monthly_overhead":
        monthly = brain.monthly_overhead or ZERO
        hours = brain.billable_hours_per_month or ONE
        return monthly / hours
    return brain.overhead_per_billable_hour or ZERO


def compute_labor_cost_multiplier(brain: FinancialBrain) -> Decimal:
    """Recommended multiplier to apply to raw labor cost.

    A margin target of 100% or more saturates at twice the burden
    multiplier, the same fallback used when pricing estimates.
    """
    burden_mult = ONE + brain.labor_burden_percent / HUNDRED

    if brain.markup_mode == "target_margin":
        return price_from_margin(burden_mult, brain.target_margin_percent or ZERO)
    return apply_markup(burden_mult, brain.markup_percent or ZERO)


def compute_financial_brain(brain: FinancialBrain) -> FinancialBrainSummary:
    """Compute the Financial Brain summary figures.

    Args:
        brain: Dashboard financial settings

    Returns:
        FinancialBrainSummary with both figures rounded half-up to 2 decimals

    Example:
        >>> summary = compute_financial_brain(FinancialBrain())
        >>> summary.overhead_per_billable_hour
        Decimal('53.13')
        >>> summary.recommended_labor_cost_multiplier
        Decimal('1.82')
    """
    return FinancialBrainSummary(
        overhead_per_billable_hour=quantize_cents(compute_brain_overhead_rate(brain)),
        recommended_labor_cost_multiplier=quantize_cents(
            compute_labor_cost_multiplier(brain)
        ),
    )


def pricing_profile_from_brain(brain: FinancialBrain) -> PricingProfile:
    """Build the estimating profile implied by the dashboard settings.

    Mapping:
    - markup_mode 'target_margin' prices in margin mode, 'markup' in markup
      mode; the dashboard markup applies to materials, the other categories
      keep their standard markups
    - a missing or zero markup, margin target or contingency falls back to
      35%, 35% and 5%
    - labor_burden_percent becomes the default crew burden
    - overhead uses the standard per-billable-hour setup (160 hours at 80%
      utilization, no fixed categories)
    - tax is charged on every cost category at the dashboard rate

    Args:
        brain: Dashboard financial settings

    Returns:
        PricingProfile ready for ``compute_estimate_price_for_profile``

    Example:
        >>> profile = pricing_profile_from_brain(FinancialBrain())
        >>> profile.pricing_strategy.mode
        'margin'
        >>> profile.pricing_strategy.contingency_percent
        Decimal('5')
    """
    contingency = brain.contingency_percent or DEFAULT_CONTINGENCY_PERCENT

    if brain.markup_mode == "target_margin":
        strategy = MarginStrategy(
            target_gross_margin_percent=(
                brain.target_margin_percent or DEFAULT_TARGET_MARGIN_PERCENT
            ),
            contingency_percent=contingency,
        )
    else:
        strategy = MarkupStrategy(
            markup_materials_percent=brain.markup_percent or DEFAULT_MARKUP_PERCENT,
            contingency_percent=contingency,
        )

    return PricingProfile(
        overhead=OverheadConfig(),
        labor=LaborSettings(burden_percent_default=brain.labor_burden_percent),
        pricing_strategy=strategy,
        tax_rules=TaxRules(
            enabled=brain.tax_enabled, tax_rate_percent=brain.tax_rate_percent
        ),
        minimum_job_price=brain.minimum_job_price or ZERO,
    )
