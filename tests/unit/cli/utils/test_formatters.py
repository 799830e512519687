"""Unit tests for CLI output formatters."""

from decimal import Decimal

import click

from estimator.cli.utils.formatters import (
    format_error,
    format_info,
    format_money,
    format_success,
    format_table,
    format_warning,
)


class TestFormatters:
    """Test suite for CLI output formatters."""

    def test_format_success_contains_message(self):
        """Test that success formatter includes the message."""
        assert "Setup check passed" in format_success("Setup check passed")

    def test_format_error_contains_message(self):
        """Test that error formatter includes the message."""
        assert "Setup check failed" in format_error("Setup check failed")

    def test_format_warning_contains_message(self):
        assert "No crew members" in format_warning("No crew members")

    def test_format_info_contains_message(self):
        assert click.unstyle(format_info("Pricing mode: markup")) == "ℹ Pricing mode: markup"


class TestFormatMoney:
    """Test money formatting."""

    def test_rounds_to_cent_with_separators(self):
        assert format_money(Decimal("2879.296875")) == "CAD 2,879.30"

    def test_currency_code(self):
        assert format_money(Decimal("36"), "USD") == "USD 36.00"

    def test_zero(self):
        assert format_money(Decimal("0")) == "CAD 0.00"


class TestFormatTable:
    """Test ASCII table formatting."""

    def test_format_table_with_headers_and_rows(self):
        """Test table formatting with headers and data."""
        result = format_table(
            ["Name", "Loaded rate"],
            [["Sam", "CAD 36.00"], ["Pavers Inc", "CAD 60.00"]],
        )
        lines = result.split("\n")

        assert lines[1] == "| Name       | Loaded rate |"
        assert lines[3] == "| Sam        | CAD 36.00   |"
        assert lines[0] == lines[2] == lines[-1]
        assert len(lines) == 6

    def test_format_table_with_empty_rows(self):
        """Test table formatting with no data rows."""
        result = format_table(["Name", "Type"], [])
        assert result.split("\n")[1] == "| Name | Type |"
        assert len(result.split("\n")) == 3

    def test_format_table_truncates_long_values(self):
        """Test long cell values are cut to the column width."""
        result = format_table(["Note"], [["x" * 30]], max_width=10)
        assert "| xxxxxxxxxx |" in result
        assert "x" * 11 not in result

    def test_format_table_without_headers(self):
        assert format_table([], [["a"]]) == ""
