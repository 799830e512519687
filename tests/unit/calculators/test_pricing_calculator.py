"""Unit tests for the estimate pricing pipeline."""

from decimal import Decimal

import pytest

from estimator.calculators.pricing_calculator import (
    EstimatePrice,
    compute_estimate_price,
    compute_estimate_price_for_profile,
)
from estimator.models import (
    CostBreakdown,
    MarginStrategy,
    MarkupStrategy,
    OverheadConfig,
    PricingProfile,
    TaxRules,
)


class TestMarkupMode:
    """Test pricing with per-category markup."""

    def test_reference_job(self, scenario_costs, scenario_overhead, scenario_markup, no_tax):
        price = compute_estimate_price(
            scenario_costs, scenario_overhead, scenario_markup, no_tax, "nearest_1"
        )

        assert isinstance(price, EstimatePrice)
        assert price.overhead_rate == Decimal("53.125")
        assert price.overhead_recovered == Decimal("531.25")
        assert price.labor_with_overhead == Decimal("1031.25")
        assert price.subtotal_before_contingency == Decimal("2742.1875")
        assert price.subtotal == Decimal("2879")
        assert price.tax == Decimal("0")
        assert price.total == Decimal("2879")

    def test_without_rounding_keeps_contingency_precision(
        self, scenario_costs, scenario_overhead, scenario_markup, no_tax
    ):
        price = compute_estimate_price(
            scenario_costs, scenario_overhead, scenario_markup, no_tax
        )
        assert price.subtotal == Decimal("2879.296875")

    def test_overhead_reported_but_not_folded_in(
        self, scenario_costs, scenario_overhead, no_tax
    ):
        strategy = MarkupStrategy(
            markup_labor_percent=35,
            markup_materials_percent=30,
            contingency_percent=0,
            include_overhead_in_cost=False,
        )
        price = compute_estimate_price(scenario_costs, scenario_overhead, strategy, no_tax)

        assert price.overhead_recovered == Decimal("531.25")
        assert price.labor_with_overhead == Decimal("500")
        # 500 × 1.35 + 1000 × 1.30 + 50
        assert price.subtotal == Decimal("2025")

    def test_logistics_not_marked_up(self, no_tax):
        costs = CostBreakdown(logistics=200)
        strategy = MarkupStrategy(contingency_percent=0)
        price = compute_estimate_price(costs, OverheadConfig(), strategy, no_tax)
        assert price.subtotal == Decimal("200")

    def test_subs_and_equipment_markups(self, no_tax):
        costs = CostBreakdown(subs=1000, equipment=400)
        strategy = MarkupStrategy(
            markup_sub_percent=15, markup_equipment_percent=20, contingency_percent=0
        )
        price = compute_estimate_price(costs, OverheadConfig(), strategy, no_tax)
        assert price.subtotal == Decimal("1630")


class TestMarginMode:
    """Test pricing to a target gross margin."""

    def test_target_margin(self, no_tax):
        costs = CostBreakdown(materials=400, labor_cost_raw=200)
        strategy = MarginStrategy(target_gross_margin_percent=40, contingency_percent=0)
        price = compute_estimate_price(costs, OverheadConfig(), strategy, no_tax)
        assert price.subtotal == Decimal("1000")

    @pytest.mark.parametrize("margin", [100, 150])
    def test_saturated_margin_doubles_cost(self, margin, no_tax):
        costs = CostBreakdown(materials=700, labor_cost_raw=250, logistics=50)
        strategy = MarginStrategy(
            target_gross_margin_percent=margin, contingency_percent=0
        )
        price = compute_estimate_price(costs, OverheadConfig(), strategy, no_tax)
        assert price.subtotal == Decimal("2000")

    def test_margin_includes_overhead(self, scenario_costs, scenario_overhead, no_tax):
        strategy = MarginStrategy(target_gross_margin_percent=50, contingency_percent=0)
        price = compute_estimate_price(scenario_costs, scenario_overhead, strategy, no_tax)
        # (1031.25 + 1000 + 50) / 0.5
        assert price.subtotal == Decimal("4162.5")


class TestTax:
    """Test tax on the taxable basis."""

    def test_basis_excludes_untaxed_categories(self):
        costs = CostBreakdown(materials=1000, labor_cost_raw=500)
        rules = TaxRules(
            enabled=True,
            tax_rate_percent=13,
            tax_applies_to={"materials": True, "labor": False},
        )
        strategy = MarkupStrategy(contingency_percent=0)
        price = compute_estimate_price(costs, OverheadConfig(), strategy, rules)

        assert price.taxable_basis == Decimal("1000")
        assert price.tax == Decimal("130.00")
        assert price.total == price.subtotal + price.tax

    def test_basis_uses_pre_markup_costs(self, scenario_costs, scenario_overhead, scenario_markup):
        price = compute_estimate_price(
            scenario_costs, scenario_overhead, scenario_markup, TaxRules(), "nearest_1"
        )
        # 1000 materials + 1031.25 labor with overhead + 50 logistics
        assert price.taxable_basis == Decimal("2081.25")
        assert price.tax == Decimal("270.56")
        assert price.total == Decimal("3149.56")

    def test_tax_not_rounded_with_none_rule(self):
        costs = CostBreakdown(materials="10.05")
        rules = TaxRules(tax_rate_percent=13, tax_rounding_rule="none")
        price = compute_estimate_price(
            costs, OverheadConfig(), MarkupStrategy(contingency_percent=0), rules
        )
        assert price.tax == Decimal("1.3065")

    def test_disabled_tax_is_zero(self, scenario_costs, scenario_overhead, scenario_markup, no_tax):
        price = compute_estimate_price(
            scenario_costs, scenario_overhead, scenario_markup, no_tax
        )
        assert price.tax == 0
        assert price.total == price.subtotal


class TestZeroInputs:
    """Test that empty estimates price to zero."""

    @pytest.mark.parametrize(
        "strategy",
        [MarkupStrategy(), MarginStrategy(), MarginStrategy(target_gross_margin_percent=100)],
    )
    @pytest.mark.parametrize("rounding", ["none", "5", "nearest_0.05", "garbage"])
    def test_zero_costs_price_to_zero(self, strategy, rounding):
        price = compute_estimate_price(
            CostBreakdown(), OverheadConfig(), strategy, TaxRules(), rounding
        )

        assert price.subtotal == 0
        assert price.tax == 0
        assert price.total == 0
        assert price.overhead_recovered == 0

    def test_zero_billable_hours(self, scenario_costs, scenario_markup, no_tax):
        overhead = OverheadConfig(
            fixed_categories=[{"name": "Rent", "amount": 8500}],
            expected_billable_hours_per_period=0,
        )
        price = compute_estimate_price(scenario_costs, overhead, scenario_markup, no_tax)
        assert price.overhead_rate == 0
        assert price.overhead_recovered == 0


class TestLargeAmounts:
    """Amounts wider than the default decimal precision."""

    def test_huge_materials_price_without_error(self):
        price = compute_estimate_price(
            CostBreakdown(materials="1e27"),
            OverheadConfig(),
            MarkupStrategy(),
            TaxRules(),
            "nearest_1",
        )

        # 1e27 × 1.35 × 1.05, taxed at 13% on the pre-markup basis
        assert price.subtotal == Decimal("1.4175e27")
        assert price.tax == Decimal("1.3e26")
        assert price.total == Decimal("1.5475e27")

    def test_rounding_step_finer_than_precision(self, no_tax):
        price = compute_estimate_price(
            CostBreakdown(materials=100),
            OverheadConfig(),
            MarkupStrategy(contingency_percent=0),
            no_tax,
            "1e-30",
        )

        assert price.subtotal == Decimal("135")


class TestPercentOverheadMethods:
    """Test percent-based overhead allocation in the pipeline."""

    def test_percent_of_labor(self, scenario_costs, no_tax):
        overhead = OverheadConfig(
            allocation_method="percent-of-labor", overhead_percent=20
        )
        strategy = MarkupStrategy(
            markup_labor_percent=0, markup_materials_percent=0, contingency_percent=0
        )
        price = compute_estimate_price(scenario_costs, overhead, strategy, no_tax)

        assert price.overhead_rate == 0
        assert price.overhead_recovered == Decimal("100")
        assert price.labor_with_overhead == Decimal("600")
        assert price.subtotal == Decimal("1650")

    def test_percent_of_revenue(self, scenario_costs, no_tax):
        overhead = OverheadConfig(
            allocation_method="percent-of-revenue", overhead_percent=10
        )
        strategy = MarkupStrategy(
            markup_labor_percent=0, markup_materials_percent=0, contingency_percent=0
        )
        price = compute_estimate_price(scenario_costs, overhead, strategy, no_tax)

        # 10% of 1550 direct cost
        assert price.overhead_recovered == Decimal("155")
        assert price.subtotal == Decimal("1705")


class TestPriceForProfile:
    """Test pricing from a full profile."""

    def test_profile_settings_are_used(self, scenario_costs, scenario_overhead, scenario_markup):
        profile = PricingProfile(
            overhead=scenario_overhead,
            pricing_strategy=scenario_markup,
            tax_rules={"enabled": False},
            total_rounding="nearest_1",
        )
        price = compute_estimate_price_for_profile(scenario_costs, profile)
        assert price.total == Decimal("2879")

    def test_inputs_not_modified(self, scenario_costs, scenario_overhead, scenario_markup, no_tax):
        before = scenario_costs.model_dump()
        compute_estimate_price(scenario_costs, scenario_overhead, scenario_markup, no_tax)
        assert scenario_costs.model_dump() == before
