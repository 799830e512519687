"""Issue collection for the setup check.

A ValidationReport gathers the findings of SetupValidator. Errors block
estimating; warnings and info messages are advisory.
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import partialmethod
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Ordered severities; higher is worse."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """One finding against a setting.

    Attributes:
        severity: How serious the finding is
        field: Dotted path of the setting, e.g. "tax_rules.enabled" or "crew[2]"
        message: What is wrong, in words an office manager understands
        value: The offending value
        context: Extra identifying details such as the worker name
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        text = f"[{self.severity.name}] {self.field}: {self.message}"
        if self.context:
            details = ", ".join(f"{key}={val}" for key, val in self.context.items())
            text += f" ({details})"
        return text


_SECTIONS = (
    (ValidationSeverity.ERROR, "ERRORS", "error(s)"),
    (ValidationSeverity.WARNING, "WARNINGS", "warning(s)"),
    (ValidationSeverity.INFO, "INFO", "info message(s)"),
)


class ValidationReport:
    """Ordered list of issues with counting and formatting helpers.

    Example:
        >>> report = ValidationReport()
        >>> report.add_warning("tax_rules.enabled", "Taxes are disabled", False)
        >>> report.is_valid()
        True
        >>> report.summary()
        '1 warning(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def add(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, field, message, value, context))

    add_error = partialmethod(add, ValidationSeverity.ERROR)
    add_warning = partialmethod(add, ValidationSeverity.WARNING)
    add_info = partialmethod(add, ValidationSeverity.INFO)

    def of_severity(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        """Issues with exactly ``severity``, in the order they were added."""
        return [issue for issue in self.issues if issue.severity is severity]

    def get_errors(self) -> List[ValidationIssue]:
        return self.of_severity(ValidationSeverity.ERROR)

    def get_warnings(self) -> List[ValidationIssue]:
        return self.of_severity(ValidationSeverity.WARNING)

    @property
    def error_count(self) -> int:
        return len(self.get_errors())

    @property
    def warning_count(self) -> int:
        return len(self.get_warnings())

    @property
    def info_count(self) -> int:
        return len(self.of_severity(ValidationSeverity.INFO))

    def has_errors(self) -> bool:
        return self.error_count > 0

    def is_valid(self) -> bool:
        """True unless the report holds an error."""
        return not self.has_errors()

    def filter_by_severity(
        self, minimum: ValidationSeverity
    ) -> List[ValidationIssue]:
        """Issues at ``minimum`` or worse, most severe first.

        The sort is stable, so issues of equal severity keep insertion order.
        """
        return sorted(
            (issue for issue in self.issues if issue.severity >= minimum),
            key=lambda issue: -issue.severity,
        )

    def merge(self, other: "ValidationReport") -> None:
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Counts per severity, e.g. "1 error(s), 2 warning(s)"."""
        counts = [
            f"{len(self.of_severity(severity))} {label}"
            for severity, _, label in _SECTIONS
            if self.of_severity(severity)
        ]
        return ", ".join(counts) if counts else "No issues found"

    def format(self) -> str:
        """Multi-line report with one section per severity present."""
        if not self.issues:
            return "Setup check passed - no issues found"

        lines = [f"Setup Report - {self.summary()}", "=" * 60]
        for severity, heading, _ in _SECTIONS:
            grouped = self.of_severity(severity)
            if not grouped:
                continue
            lines.append(f"\n{heading}:")
            lines.extend(f"  - {issue}" for issue in grouped)
        return "\n".join(lines)
