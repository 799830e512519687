"""Financial setup check command."""

import click

from estimator.cli.error_handlers import with_error_handling
from estimator.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
    format_warning,
)
from estimator.config.settings import get_config
from estimator.models.labor import LaborSettings
from estimator.readers.profile_reader import ProfileReader
from estimator.utils.logging_utils import LogContext, generate_correlation_id
from estimator.validators.setup_validator import check_financial_setup
from estimator.validators.validation_report import ValidationSeverity

_FORMATTERS = {
    ValidationSeverity.ERROR: format_error,
    ValidationSeverity.WARNING: format_warning,
    ValidationSeverity.INFO: format_info,
}


@click.command(name="check-setup")
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--severity",
    type=click.Choice(["error", "warning", "info"], case_sensitive=False),
    default="warning",
    help="Minimum severity level to display (default: warning)",
)
@click.pass_context
def check_setup(ctx: click.Context, profile_path: str, severity: str):
    """Check a pricing profile for incomplete financial setup.

    Returns a non-zero exit code if errors are found.

    Example:
        estimator check-setup profile.json
        estimator check-setup profile.json --severity info
    """
    with with_error_handling(ctx.obj["debug"]):
        with LogContext(
            correlation_id=generate_correlation_id(), command="check-setup"
        ):
            profile = ProfileReader().read_profile(
                profile_path,
                labor_defaults=LaborSettings.from_config(get_config()),
            )
            report = check_financial_setup(profile)

        for issue in report.filter_by_severity(ValidationSeverity[severity.upper()]):
            click.echo(_FORMATTERS[issue.severity](str(issue)))

        click.echo()
        if report.has_errors():
            click.echo(format_error(f"Setup check failed: {report.summary()}"))
            ctx.exit(1)
        elif report.warning_count:
            click.echo(format_warning(f"Setup check completed: {report.summary()}"))
        else:
            click.echo(format_success("Setup check passed"))
