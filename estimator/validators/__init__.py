"""Validation layer for financial setup checks."""

from estimator.validators.setup_validator import check_financial_setup
from estimator.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "check_financial_setup",
]
