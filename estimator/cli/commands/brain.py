"""Financial Brain command."""

import click

from estimator.calculators.financial_brain import compute_financial_brain
from estimator.cli.error_handlers import with_error_handling
from estimator.cli.utils.formatters import format_money, format_success
from estimator.readers.profile_reader import ProfileReader


@click.command(name="financial-brain")
@click.argument("brain_path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def financial_brain(ctx: click.Context, brain_path: str):
    """Compute overhead per billable hour and the labor cost multiplier.

    Example:
        estimator financial-brain brain.json
    """
    with with_error_handling(ctx.obj["debug"]):
        brain = ProfileReader().read_financial_brain(brain_path)
        summary = compute_financial_brain(brain)

        click.echo(format_success("Financial Brain computed"))
        click.echo(
            "Overhead per billable hour: "
            f"{format_money(summary.overhead_per_billable_hour, brain.currency)}/hr"
        )
        click.echo(
            "Recommended labor cost multiplier: "
            f"x{summary.recommended_labor_cost_multiplier}"
        )
