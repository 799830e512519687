"""Financial setup checks.

Mirrors the "Setup Checklist" of the financial rules screen: before quoting,
a company should have taxes configured, overhead recovery set up, a labor
burden and a pricing strategy. Settings that make the pricing pipeline fall
back to a degenerate value (zero overhead rate, zero loaded rate, saturated
margin) are reported too, since the pipeline itself never complains.
"""

import logging

from estimator.calculators.labor_calculator import compute_loaded_rate
from estimator.calculators.overhead_calculator import (
    compute_effective_billable_hours,
)
from estimator.calculators.rate_primitives import HUNDRED, ZERO
from estimator.models.profile import PricingProfile
from estimator.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


def _check_tax(profile: PricingProfile, report: ValidationReport) -> None:
    rules = profile.tax_rules
    if not rules.enabled:
        report.add_warning("tax_rules.enabled", "Taxes are disabled", rules.enabled)
    elif rules.tax_rate_percent == ZERO:
        report.add_warning(
            "tax_rules.tax_rate_percent",
            "Taxes are enabled with a 0% rate",
            rules.tax_rate_percent,
        )


def _check_overhead(profile: PricingProfile, report: ValidationReport) -> None:
    overhead = profile.overhead

    if overhead.allocation_method == "per-billable-hour":
        if not overhead.fixed_categories:
            report.add_warning(
                "overhead.fixed_categories",
                "No fixed overhead categories, no overhead will be recovered",
                [],
            )
        effective_hours = compute_effective_billable_hours(overhead)
        if effective_hours <= ZERO:
            report.add_warning(
                "overhead.expected_billable_hours_per_period",
                "No effective billable hours, overhead rate falls back to 0",
                effective_hours,
            )
    elif overhead.overhead_percent == ZERO:
        report.add_warning(
            "overhead.overhead_percent",
            f"Overhead method '{overhead.allocation_method}' has a 0% rate",
            overhead.overhead_percent,
        )


def _check_labor(profile: PricingProfile, report: ValidationReport) -> None:
    labor = profile.labor
    if labor.burden_percent_default <= ZERO:
        report.add_warning(
            "labor.burden_percent_default",
            "Default labor burden is not set",
            labor.burden_percent_default,
        )

    for index, worker in enumerate(profile.crew):
        loaded = compute_loaded_rate(
            worker, labor.burden_percent_default, labor.salary_hours_per_year
        )
        if loaded == ZERO and worker.status == "active":
            report.add_error(
                f"crew[{index}]",
                f"No usable {worker.employment_type} rate, loaded cost is 0",
                worker.model_dump(
                    include={"base_rate", "salary_annual", "subcontract_rate"}
                ),
                context={"worker": worker.name or f"#{index}"},
            )


def _check_pricing(profile: PricingProfile, report: ValidationReport) -> None:
    strategy = profile.pricing_strategy
    if strategy.mode == "margin" and strategy.target_gross_margin_percent >= HUNDRED:
        report.add_info(
            "pricing_strategy.target_gross_margin_percent",
            "Margin target of 100% or more, estimates will be priced at cost x 2",
            strategy.target_gross_margin_percent,
        )


def check_financial_setup(profile: PricingProfile) -> ValidationReport:
    """Check a pricing profile for incomplete or degenerate settings.

    Args:
        profile: Pricing profile to check

    Returns:
        ValidationReport with the issues found

    Example:
        >>> report = check_financial_setup(PricingProfile())
        >>> [issue.field for issue in report.get_warnings()]
        ['overhead.fixed_categories']
    """
    report = ValidationReport()

    _check_tax(profile, report)
    _check_overhead(profile, report)
    _check_labor(profile, report)
    _check_pricing(profile, report)

    logger.info("Financial setup check: %s", report.summary())
    return report
