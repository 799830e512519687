"""Cost breakdown model for estimate pricing.

This module defines the CostBreakdown model: the raw, pre-markup job costs
that the pricing pipeline turns into a client-facing price.
"""

from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from estimator.models.base import BaseDataModel, coerce_decimal


class CostBreakdown(BaseDataModel):
    """Raw job costs consumed by a single pricing call.

    Attributes:
        materials: Materials cost before markup
        labor_hours: Total crew hours on the job
        labor_cost_raw: Labor cost before overhead and markup
        subs: Subcontractor allowance
        equipment: Equipment cost
        logistics: Logistics cost (passed through without markup)

    Example:
        >>> costs = CostBreakdown(materials=1000, labor_hours=10, labor_cost_raw=500)
        >>> costs.direct_cost
        Decimal('1500')
    """

    materials: Decimal = Field(Decimal("0"), ge=0, description="Materials cost")
    labor_hours: Decimal = Field(Decimal("0"), ge=0, description="Labor hours")
    labor_cost_raw: Decimal = Field(
        Decimal("0"), ge=0, description="Labor cost before overhead and markup"
    )
    subs: Decimal = Field(Decimal("0"), ge=0, description="Subcontractor allowance")
    equipment: Decimal = Field(Decimal("0"), ge=0, description="Equipment cost")
    logistics: Decimal = Field(Decimal("0"), ge=0, description="Logistics cost")

    @field_validator(
        "materials",
        "labor_hours",
        "labor_cost_raw",
        "subs",
        "equipment",
        "logistics",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)

    @property
    def direct_cost(self) -> Decimal:
        """Sum of all five cost categories, without overhead or markup."""
        return (
            self.materials
            + self.labor_cost_raw
            + self.subs
            + self.equipment
            + self.logistics
        )
