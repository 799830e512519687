"""Crew loaded rates command."""

import click

from estimator.calculators.labor_calculator import (
    average_loaded_rate,
    resolve_burden_percent,
    sync_loaded_costs,
)
from estimator.cli.error_handlers import with_error_handling
from estimator.cli.utils.formatters import (
    format_money,
    format_table,
    format_warning,
)
from estimator.config.settings import get_config
from estimator.models.labor import LaborSettings
from estimator.readers.profile_reader import ProfileReader
from estimator.utils.logging_utils import LogContext, generate_correlation_id


@click.command(name="loaded-rates")
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def loaded_rates(ctx: click.Context, profile_path: str):
    """Show the fully loaded hourly cost of every crew member.

    Example:
        estimator loaded-rates profile.json
    """
    with with_error_handling(ctx.obj["debug"]):
        settings = get_config()

        with LogContext(
            correlation_id=generate_correlation_id(), command="loaded-rates"
        ):
            profile = ProfileReader().read_profile(
                profile_path,
                labor_defaults=LaborSettings.from_config(settings),
            )

        if not profile.crew:
            click.echo(format_warning("No crew members in profile"))
            return

        burden = profile.labor.burden_percent_default
        hours = profile.labor.salary_hours_per_year
        loaded = sync_loaded_costs(profile.crew, burden, hours)

        rows = [
            [
                cost.name or "-",
                cost.employment_type,
                worker.status,
                f"{resolve_burden_percent(worker, burden)}%",
                format_money(cost.loaded_rate, settings.currency),
            ]
            for worker, cost in zip(profile.crew, loaded)
        ]
        click.echo(
            format_table(["Name", "Type", "Status", "Burden", "Loaded rate"], rows)
        )
        average = average_loaded_rate(profile.crew, burden, hours)
        click.echo(
            "Average loaded rate (active): "
            f"{format_money(average, settings.currency)}/hr"
        )
