"""Calculator modules for the estimating core."""

from estimator.calculators.financial_brain import (
    FinancialBrainSummary,
    compute_brain_overhead_rate,
    compute_financial_brain,
    compute_labor_cost_multiplier,
    pricing_profile_from_brain,
)
from estimator.calculators.labor_calculator import (
    LoadedCost,
    average_loaded_rate,
    compute_loaded_rate,
    resolve_burden_percent,
    sync_loaded_costs,
)
from estimator.calculators.overhead_calculator import (
    compute_effective_billable_hours,
    compute_overhead_rate,
    compute_overhead_recovered,
    compute_total_monthly_overhead,
)
from estimator.calculators.pricing_calculator import (
    EstimatePrice,
    compute_estimate_price,
    compute_estimate_price_for_profile,
)
from estimator.calculators.rate_primitives import (
    apply_markup,
    apply_rounding,
    compute_tax,
    parse_rounding_step,
    price_from_margin,
    quantize_cents,
    taxable_basis,
    to_decimal,
)

__all__ = [
    # financial_brain
    "FinancialBrainSummary",
    "compute_brain_overhead_rate",
    "compute_financial_brain",
    "compute_labor_cost_multiplier",
    "pricing_profile_from_brain",
    # labor_calculator
    "LoadedCost",
    "average_loaded_rate",
    "compute_loaded_rate",
    "resolve_burden_percent",
    "sync_loaded_costs",
    # overhead_calculator
    "compute_effective_billable_hours",
    "compute_overhead_rate",
    "compute_overhead_recovered",
    "compute_total_monthly_overhead",
    # pricing_calculator
    "EstimatePrice",
    "compute_estimate_price",
    "compute_estimate_price_for_profile",
    # rate_primitives
    "apply_markup",
    "apply_rounding",
    "compute_tax",
    "parse_rounding_step",
    "price_from_margin",
    "quantize_cents",
    "taxable_basis",
    "to_decimal",
]
