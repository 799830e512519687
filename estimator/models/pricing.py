"""Pricing strategy models.

A pricing strategy is either markup-based (separate markups per cost
category) or margin-based (one target gross margin over total cost). The
two are modelled as a discriminated union on ``mode`` so a margin strategy
cannot silently carry markup fields and vice versa.
"""

from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import Field, field_validator

from estimator.models.base import BaseDataModel, coerce_decimal


class _StrategyBase(BaseDataModel):
    """Fields shared by both pricing modes."""

    contingency_percent: Decimal = Field(
        Decimal("5"), description="Contingency applied after pricing"
    )
    include_overhead_in_cost: bool = Field(
        True, description="Fold recovered overhead into the labor cost base"
    )

    @field_validator("contingency_percent", mode="before")
    @classmethod
    def convert_contingency(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)


class MarkupStrategy(_StrategyBase):
    """Markup-based pricing: each cost category gets its own markup.

    Negative markups are allowed and act as discounts.

    Example:
        >>> strategy = MarkupStrategy(markup_labor_percent=35, markup_materials_percent=30)
        >>> strategy.mode
        'markup'
    """

    mode: Literal["markup"] = "markup"
    markup_labor_percent: Decimal = Field(Decimal("35"), description="Labor markup")
    markup_materials_percent: Decimal = Field(
        Decimal("35"), description="Materials markup"
    )
    markup_sub_percent: Decimal = Field(Decimal("15"), description="Subcontractor markup")
    markup_equipment_percent: Decimal = Field(
        Decimal("20"), description="Equipment markup"
    )

    @field_validator(
        "markup_labor_percent",
        "markup_materials_percent",
        "markup_sub_percent",
        "markup_equipment_percent",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)


class MarginStrategy(_StrategyBase):
    """Margin-based pricing: price so that gross margin hits a target.

    ``target_net_profit_percent`` is reporting metadata and does not take
    part in the price computation.

    Example:
        >>> MarginStrategy(target_gross_margin_percent=40).target_gross_margin_percent
        Decimal('40')
    """

    mode: Literal["margin"] = "margin"
    target_gross_margin_percent: Decimal = Field(
        Decimal("35"), description="Target gross margin percent"
    )
    target_net_profit_percent: Decimal = Field(
        Decimal("15"), description="Target net profit percent (metadata)"
    )

    @field_validator(
        "target_gross_margin_percent", "target_net_profit_percent", mode="before"
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)


PricingStrategy = Annotated[
    Union[MarkupStrategy, MarginStrategy], Field(discriminator="mode")
]
