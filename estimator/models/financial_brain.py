"""Financial Brain settings model.

The Financial Brain is the simplified settings panel of the back office:
a monthly overhead budget, a labor burden and a single markup or margin
target. From it the dashboard derives the overhead per billable hour and a
recommended multiplier to apply to raw labor cost.
"""

from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from estimator.models.base import BaseDataModel, coerce_decimal


class FinancialBrain(BaseDataModel):
    """Simplified company financial settings.

    Attributes:
        currency: Currency code used for display
        overhead_mode: 'monthly_overhead' derives the hourly rate from the
            monthly budget; 'overhead_per_billable_hour' uses it directly
        monthly_overhead: Monthly overhead budget
        billable_hours_per_month: Billable hours per month
        overhead_per_billable_hour: Direct hourly overhead rate
        labor_burden_percent: Burden applied on top of wages
        markup_mode: 'target_margin' or 'markup'
        target_margin_percent: Gross margin target (target_margin mode)
        markup_percent: Markup on cost (markup mode)
        minimum_job_price: Smallest job worth quoting
        contingency_percent: Contingency applied to quotes
        tax_enabled: Whether quotes are taxed
        tax_rate_percent: Sales tax rate

    Example:
        >>> brain = FinancialBrain(monthly_overhead=8500, billable_hours_per_month=160)
        >>> brain.overhead_mode
        'monthly_overhead'
    """

    currency: Literal["CAD", "USD"] = Field("CAD", description="Currency code")
    overhead_mode: Literal["monthly_overhead", "overhead_per_billable_hour"] = Field(
        "monthly_overhead", description="How the overhead rate is derived"
    )
    monthly_overhead: Optional[Decimal] = Field(Decimal("8500"), ge=0)
    billable_hours_per_month: Optional[Decimal] = Field(Decimal("160"), ge=0)
    overhead_per_billable_hour: Optional[Decimal] = Field(None, ge=0)
    labor_burden_percent: Decimal = Field(Decimal("18"), description="Labor burden")
    markup_mode: Literal["target_margin", "markup"] = Field(
        "target_margin", description="Pricing mode"
    )
    target_margin_percent: Optional[Decimal] = Field(Decimal("35"))
    markup_percent: Optional[Decimal] = Field(None)
    minimum_job_price: Optional[Decimal] = Field(None, ge=0)
    contingency_percent: Optional[Decimal] = Field(Decimal("5"))
    tax_enabled: bool = Field(True, description="Charge tax")
    tax_rate_percent: Decimal = Field(Decimal("13"), ge=0, description="Tax rate")

    @field_validator(
        "monthly_overhead",
        "billable_hours_per_month",
        "overhead_per_billable_hour",
        "labor_burden_percent",
        "target_margin_percent",
        "markup_percent",
        "minimum_job_price",
        "contingency_percent",
        "tax_rate_percent",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)
