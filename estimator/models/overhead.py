"""Overhead configuration models.

This module defines how a company's fixed monthly expenses are recovered
on jobs: either as an hourly rate over billable hours, or as a percentage
of labor cost or revenue.
"""

from decimal import Decimal
from typing import Any, List, Literal

from pydantic import Field, field_validator

from estimator.models.base import BaseDataModel, coerce_decimal

AllocationMethod = Literal["per-billable-hour", "percent-of-labor", "percent-of-revenue"]

# Spellings used by the settings store
_ALLOCATION_ALIASES = {
    "perBillableHour": "per-billable-hour",
    "percentOfLabor": "percent-of-labor",
    "percentOfRevenue": "percent-of-revenue",
}


class FixedExpenseCategory(BaseDataModel):
    """A named fixed monthly expense (rent, insurance, office wages, ...).

    Example:
        >>> FixedExpenseCategory(name="Yard lease", amount="2500").amount
        Decimal('2500')
    """

    name: str = Field(..., min_length=1, description="Expense category name")
    amount: Decimal = Field(..., ge=0, description="Monthly amount")

    @field_validator("name")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate that the name is not whitespace only."""
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)


class OverheadConfig(BaseDataModel):
    """Overhead recovery configuration.

    Attributes:
        allocation_method: How overhead is recovered on a job
        fixed_categories: Fixed monthly expenses; their sum is the budget
        expected_billable_hours_per_period: Billable hours expected per month
        utilization_percent: Share of expected hours actually billed (0-100)
        overhead_percent: Percentage used by the percent-of-labor and
            percent-of-revenue methods; ignored for per-billable-hour

    Example:
        >>> config = OverheadConfig(
        ...     fixed_categories=[{"name": "Rent", "amount": 8500}],
        ...     expected_billable_hours_per_period=160,
        ...     utilization_percent=100,
        ... )
        >>> config.allocation_method
        'per-billable-hour'
    """

    allocation_method: AllocationMethod = Field(
        "per-billable-hour", description="Overhead allocation method"
    )
    fixed_categories: List[FixedExpenseCategory] = Field(
        default_factory=list, description="Fixed monthly expense categories"
    )
    expected_billable_hours_per_period: Decimal = Field(
        Decimal("160"), ge=0, description="Expected billable hours per period"
    )
    utilization_percent: Decimal = Field(
        Decimal("80"), ge=0, le=100, description="Utilization percentage (0-100)"
    )
    overhead_percent: Decimal = Field(
        Decimal("0"), ge=0, description="Percentage for percent-based methods"
    )

    @field_validator("allocation_method", mode="before")
    @classmethod
    def normalize_allocation_method(cls, v: Any) -> Any:
        """Accept the camelCase spellings used by the settings store."""
        if isinstance(v, str):
            return _ALLOCATION_ALIASES.get(v, v)
        return v

    @field_validator(
        "expected_billable_hours_per_period",
        "utilization_percent",
        "overhead_percent",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)
