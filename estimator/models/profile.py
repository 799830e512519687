"""Pricing profile model.

A PricingProfile bundles every setting the pricing pipeline consumes:
overhead recovery, labor defaults, pricing strategy, tax rules and the
rounding applied to quote totals, plus the crew roster and the minimum
job price.
"""

from decimal import Decimal
from typing import Any, List, Union

from pydantic import Field, field_validator

from estimator.models.base import BaseDataModel, coerce_decimal
from estimator.models.labor import LaborProfile, LaborSettings
from estimator.models.overhead import OverheadConfig
from estimator.models.pricing import MarginStrategy, PricingStrategy
from estimator.models.tax import TaxRules

RoundingRule = Union[str, int, float, Decimal]


def normalize_rounding_rule(v: Any) -> Any:
    """Store rounding rules as strings ('none', '5', 'nearest_0.10').

    Numbers are converted with ``str`` so that ``5`` and ``"5"`` are the
    same rule. Whether the rule is usable is decided when it is applied.
    """
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float, Decimal)):
        return str(v)
    return v


class PricingProfile(BaseDataModel):
    """Company pricing settings consumed by the estimating core.

    Example:
        >>> profile = PricingProfile(total_rounding=5)
        >>> profile.total_rounding
        '5'
        >>> profile.pricing_strategy.mode
        'margin'
    """

    overhead: OverheadConfig = Field(default_factory=OverheadConfig)
    labor: LaborSettings = Field(default_factory=LaborSettings)
    pricing_strategy: PricingStrategy = Field(default_factory=MarginStrategy)
    tax_rules: TaxRules = Field(default_factory=TaxRules)
    total_rounding: str = Field("none", description="Rounding rule for quote totals")
    crew: List[LaborProfile] = Field(default_factory=list, description="Crew roster")
    minimum_job_price: Decimal = Field(
        Decimal("0"), ge=0, description="Smallest quote total worth taking on"
    )

    @field_validator("total_rounding", mode="before")
    @classmethod
    def convert_rounding_rule(cls, v: Any) -> Any:
        """Accept numeric rounding steps as well as rule strings."""
        return normalize_rounding_rule(v)

    @field_validator("minimum_job_price", mode="before")
    @classmethod
    def convert_minimum_job_price(cls, v: Any) -> Any:
        return coerce_decimal(v)
