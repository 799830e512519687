"""Labor data models.

This module defines the LaborProfile model (a single crew member's pay
structure) and the LaborSettings model (company-wide labor defaults).
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Literal, Optional

from pydantic import Field, field_validator

from estimator.models.base import BaseDataModel, coerce_decimal

if TYPE_CHECKING:
    from estimator.config.settings import EstimatorConfig

EmploymentType = Literal["hourly", "salary", "subcontract"]


class LaborProfile(BaseDataModel):
    """Pay structure of a single worker.

    Exactly one of ``base_rate``, ``salary_annual`` and ``subcontract_rate``
    is meaningful, selected by ``employment_type``. The others may be set
    (for example after a worker changes type) but are never read.

    Attributes:
        name: Worker name, used for reporting only
        status: Whether the worker is currently active
        employment_type: 'hourly', 'salary' or 'subcontract'
        base_rate: Hourly wage (hourly workers)
        salary_annual: Annual salary (salaried workers)
        subcontract_rate: Hourly rate charged by a subcontractor
        burden_percent_override: Per-worker burden; None uses the global default

    Example:
        >>> worker = LaborProfile(name="Sam", employment_type="hourly", base_rate=30)
        >>> worker.base_rate
        Decimal('30')
    """

    name: Optional[str] = Field(None, description="Worker name")
    status: Literal["active", "inactive"] = Field("active", description="Status")
    employment_type: EmploymentType = Field(..., description="Employment type")
    base_rate: Optional[Decimal] = Field(None, ge=0, description="Hourly wage")
    salary_annual: Optional[Decimal] = Field(None, ge=0, description="Annual salary")
    subcontract_rate: Optional[Decimal] = Field(
        None, ge=0, description="Subcontractor hourly rate"
    )
    burden_percent_override: Optional[Decimal] = Field(
        None, description="Burden percent override (None = global default)"
    )

    @field_validator(
        "base_rate",
        "salary_annual",
        "subcontract_rate",
        "burden_percent_override",
        mode="before",
    )
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)


class LaborSettings(BaseDataModel):
    """Company-wide labor costing defaults.

    Attributes:
        burden_percent_default: Burden applied to employees without an override
        salary_hours_per_year: Hours used to convert an annual salary to hourly
    """

    burden_percent_default: Decimal = Field(Decimal("18"), description="Default burden")
    salary_hours_per_year: Decimal = Field(
        Decimal("2080"), ge=0, description="Annual hours for salaried workers"
    )

    @field_validator("burden_percent_default", "salary_hours_per_year", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Any:
        """Convert numeric values to Decimal for precision."""
        return coerce_decimal(v)

    @classmethod
    def from_config(cls, settings: "EstimatorConfig") -> "LaborSettings":
        """Labor defaults from the environment settings."""
        return cls(
            burden_percent_default=settings.default_burden_percent,
            salary_hours_per_year=settings.salary_hours_per_year,
        )
