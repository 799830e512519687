"""Data models for the estimating core.

This package contains Pydantic models for every pricing input:
- BaseDataModel: Base class with common configuration
- CostBreakdown: Raw job costs for one pricing call
- OverheadConfig / FixedExpenseCategory: Overhead recovery settings
- LaborProfile / LaborSettings: Worker pay structure and labor defaults
- MarkupStrategy / MarginStrategy: The two pricing modes
- TaxRules / TaxAppliesTo: Tax rate, basis and rounding
- FinancialBrain: Simplified dashboard settings
- PricingProfile: All of the above bundled
"""

from estimator.models.base import BaseDataModel, coerce_decimal
from estimator.models.costs import CostBreakdown
from estimator.models.financial_brain import FinancialBrain
from estimator.models.labor import EmploymentType, LaborProfile, LaborSettings
from estimator.models.overhead import (
    AllocationMethod,
    FixedExpenseCategory,
    OverheadConfig,
)
from estimator.models.pricing import MarginStrategy, MarkupStrategy, PricingStrategy
from estimator.models.profile import PricingProfile, RoundingRule
from estimator.models.tax import TaxAppliesTo, TaxRoundingRule, TaxRules

__all__ = [
    "AllocationMethod",
    "BaseDataModel",
    "CostBreakdown",
    "EmploymentType",
    "FinancialBrain",
    "FixedExpenseCategory",
    "LaborProfile",
    "LaborSettings",
    "MarginStrategy",
    "MarkupStrategy",
    "OverheadConfig",
    "PricingProfile",
    "PricingStrategy",
    "RoundingRule",
    "TaxAppliesTo",
    "TaxRoundingRule",
    "TaxRules",
    "coerce_decimal",
]
