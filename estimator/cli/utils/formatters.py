"""Output formatting utilities for CLI."""

from decimal import Decimal
from typing import List, Sequence

import click

from estimator.calculators.rate_primitives import quantize_cents


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_money(amount: Decimal, currency: str = "CAD") -> str:
    """Format an amount rounded to the cent with thousands separators.

    Example:
        >>> format_money(Decimal("2879.296875"))
        'CAD 2,879.30'
    """
    return f"{currency} {quantize_cents(amount):,.2f}"


def format_table(
    headers: List[str], rows: Sequence[Sequence[object]], max_width: int = 80
) -> str:
    """Format data as an ASCII table.

    Args:
        headers: Column headers
        rows: Data rows (each row is a sequence of cell values)
        max_width: Maximum width for each column (default: 80)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(col_widths)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))

    col_widths = [min(w, max_width) for w in col_widths]

    def render(cells: Sequence[object]) -> str:
        return (
            "|"
            + "|".join(
                f" {str(cell)[: col_widths[i]]:<{col_widths[i]}} "
                for i, cell in enumerate(cells[: len(col_widths)])
            )
            + "|"
        )

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)

    return "\n".join(lines)
