"""Tax rules model.

This module defines which cost categories are taxable, at what rate, and
how the tax amount is rounded.
"""

from decimal import Decimal
from typing import Any, Dict, Literal

from pydantic import Field, field_validator

from estimator.models.base import BaseDataModel, coerce_decimal

TaxRoundingRule = Literal["none", "cent"]

# Rounding rule names used by the settings store; anything but "none"
# rounds the tax to the cent.
_ROUNDING_ALIASES = {
    "roundOnSubtotal": "cent",
    "roundPerLine": "cent",
    "round_to_cent": "cent",
}


class TaxAppliesTo(BaseDataModel):
    """Per-category flags for the taxable basis."""

    materials: bool = True
    labor: bool = True
    subs: bool = True
    equipment: bool = True
    logistics: bool = True

    def flags(self) -> Dict[str, bool]:
        """Return the flags keyed by category name."""
        return self.model_dump()


class TaxRules(BaseDataModel):
    """Sales tax configuration.

    Attributes:
        enabled: Whether tax is charged at all
        tax_rate_percent: Tax rate in percent
        tax_applies_to: Which cost categories form the taxable basis
        tax_rounding_rule: 'none' or 'cent'

    Example:
        >>> rules = TaxRules(tax_rate_percent=13, tax_applies_to={"labor": False})
        >>> rules.tax_applies_to.labor
        False
    """

    enabled: bool = Field(True, description="Charge tax")
    tax_rate_percent: Decimal = Field(Decimal("13"), ge=0, description="Tax rate")
    tax_applies_to: TaxAppliesTo = Field(
        default_factory=TaxAppliesTo, description="Taxable categories"
    )
    tax_rounding_rule: TaxRoundingRule = Field("cent", description="Tax rounding")

    @field_validator("tax_rate_percent", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)

    @field_validator("tax_rounding_rule", mode="before")
    @classmethod
    def normalize_rounding_rule(cls, v: Any) -> Any:
        """Map the settings store's rounding rule names onto 'none'/'cent'."""
        if isinstance(v, str):
            return _ROUNDING_ALIASES.get(v, v)
        return v
