"""Unit tests for the pricing input models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from estimator.models import (
    CostBreakdown,
    FixedExpenseCategory,
    LaborProfile,
    MarginStrategy,
    MarkupStrategy,
    OverheadConfig,
    PricingProfile,
    TaxRules,
    coerce_decimal,
)


class TestCoerceDecimal:
    """Test numeric coercion."""

    def test_float_goes_through_str(self):
        assert coerce_decimal(0.1) == Decimal("0.1")

    def test_string_is_stripped(self):
        assert coerce_decimal(" 12.50 ") == Decimal("12.50")

    def test_none_and_bool_pass_through(self):
        assert coerce_decimal(None) is None
        assert coerce_decimal(True) is True

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            coerce_decimal("twelve")


class TestCostBreakdown:
    """Test CostBreakdown model."""

    def test_defaults_are_zero(self):
        costs = CostBreakdown()
        assert costs.direct_cost == Decimal("0")
        assert costs.labor_hours == Decimal("0")

    def test_direct_cost_excludes_hours(self):
        costs = CostBreakdown(
            materials=1000, labor_hours=10, labor_cost_raw=500, logistics=50
        )
        assert costs.direct_cost == Decimal("1550")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CostBreakdown(materials=-1)
        assert "materials" in str(exc_info.value)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            CostBreakdown(material=100)

    def test_frozen(self):
        costs = CostBreakdown(materials=100)
        with pytest.raises(ValidationError):
            costs.materials = Decimal("200")


class TestOverheadConfig:
    """Test OverheadConfig model."""

    def test_defaults(self):
        config = OverheadConfig()
        assert config.allocation_method == "per-billable-hour"
        assert config.expected_billable_hours_per_period == Decimal("160")
        assert config.utilization_percent == Decimal("80")
        assert config.fixed_categories == []

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("perBillableHour", "per-billable-hour"),
            ("percentOfLabor", "percent-of-labor"),
            ("percentOfRevenue", "percent-of-revenue"),
        ],
    )
    def test_settings_store_spellings(self, alias, expected):
        assert OverheadConfig(allocation_method=alias).allocation_method == expected

    def test_utilization_above_100_rejected(self):
        with pytest.raises(ValidationError):
            OverheadConfig(utilization_percent=120)

    def test_blank_category_name_rejected(self):
        with pytest.raises(ValidationError):
            FixedExpenseCategory(name="   ", amount=100)


class TestLaborProfile:
    """Test LaborProfile model."""

    def test_employment_type_required(self):
        with pytest.raises(ValidationError):
            LaborProfile(name="Sam", base_rate=30)

    def test_unknown_employment_type_rejected(self):
        with pytest.raises(ValidationError):
            LaborProfile(employment_type="contractor", base_rate=30)

    def test_override_may_be_zero(self):
        worker = LaborProfile(
            employment_type="hourly", base_rate=30, burden_percent_override=0
        )
        assert worker.burden_percent_override == Decimal("0")


class TestPricingStrategy:
    """Test the markup/margin discriminated union."""

    def test_profile_defaults_to_margin(self):
        assert isinstance(PricingProfile().pricing_strategy, MarginStrategy)

    def test_mode_selects_strategy(self):
        profile = PricingProfile(
            pricing_strategy={"mode": "markup", "markup_labor_percent": 40}
        )
        assert isinstance(profile.pricing_strategy, MarkupStrategy)
        assert profile.pricing_strategy.markup_labor_percent == Decimal("40")

    def test_margin_strategy_rejects_markup_fields(self):
        with pytest.raises(ValidationError):
            PricingProfile(
                pricing_strategy={"mode": "margin", "markup_labor_percent": 35}
            )

    def test_markup_strategy_rejects_margin_fields(self):
        with pytest.raises(ValidationError):
            MarkupStrategy(target_gross_margin_percent=35)

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            PricingProfile(pricing_strategy={"mode": "cost-plus"})

    def test_defaults(self):
        strategy = MarkupStrategy()
        assert strategy.contingency_percent == Decimal("5")
        assert strategy.include_overhead_in_cost is True
        assert strategy.markup_sub_percent == Decimal("15")


class TestTaxRules:
    """Test TaxRules model."""

    def test_defaults(self):
        rules = TaxRules()
        assert rules.enabled is True
        assert rules.tax_rate_percent == Decimal("13")
        assert rules.tax_rounding_rule == "cent"
        assert all(rules.tax_applies_to.flags().values())

    @pytest.mark.parametrize("rule", ["roundOnSubtotal", "roundPerLine", "round_to_cent"])
    def test_rounding_aliases_round_to_cent(self, rule):
        assert TaxRules(tax_rounding_rule=rule).tax_rounding_rule == "cent"

    def test_partial_applies_to(self):
        rules = TaxRules(tax_applies_to={"labor": False})
        assert rules.tax_applies_to.flags() == {
            "materials": True,
            "labor": False,
            "subs": True,
            "equipment": True,
            "logistics": True,
        }


class TestPricingProfile:
    """Test PricingProfile model."""

    @pytest.mark.parametrize(
        "rule,expected", [(5, "5"), (0.05, "0.05"), ("nearest_1", "nearest_1")]
    )
    def test_rounding_rule_stored_as_string(self, rule, expected):
        assert PricingProfile(total_rounding=rule).total_rounding == expected

    def test_defaults(self):
        profile = PricingProfile()
        assert profile.total_rounding == "none"
        assert profile.labor.burden_percent_default == Decimal("18")
        assert profile.labor.salary_hours_per_year == Decimal("2080")
        assert profile.crew == []
        assert profile.minimum_job_price == 0

    def test_minimum_job_price(self):
        profile = PricingProfile(minimum_job_price="1500")
        assert profile.minimum_job_price == Decimal("1500")
        with pytest.raises(ValidationError):
            PricingProfile(minimum_job_price=-1)
