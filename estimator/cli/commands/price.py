"""Price estimates command."""

import json
import logging
from typing import Optional

import click

from estimator.calculators.financial_brain import pricing_profile_from_brain
from estimator.calculators.pricing_calculator import compute_estimate_price
from estimator.cli.error_handlers import with_error_handling
from estimator.cli.utils.formatters import (
    format_info,
    format_money,
    format_table,
    format_warning,
)
from estimator.config.settings import get_config
from estimator.models.labor import LaborSettings
from estimator.readers.profile_reader import ProfileReader
from estimator.utils.logging_utils import LogContext, generate_correlation_id

logger = logging.getLogger(__name__)


@click.command(name="price")
@click.argument("profile_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("costs_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--rounding",
    type=str,
    default=None,
    help="Rounding rule for totals, overriding the profile (none, 5, nearest_10, ...)",
)
@click.option(
    "--brain",
    "from_brain",
    is_flag=True,
    help="PROFILE_PATH is a Financial Brain document instead of a pricing profile",
)
@click.option(
    "--json", "as_json", is_flag=True, help="Print results as JSON instead of a table"
)
@click.pass_context
def price_estimate(
    ctx: click.Context,
    profile_path: str,
    costs_path: str,
    rounding: Optional[str],
    as_json: bool,
    from_brain: bool,
):
    """Price one or more cost breakdowns with a pricing profile.

    COSTS_PATH holds a single cost breakdown or a list of them (JSON), or
    one estimate per row (CSV). With --brain the pricing settings are
    derived from a Financial Brain document.

    Example:
        estimator price profile.json costs.json
        estimator price profile.json costs.json --rounding nearest_10 --json
        estimator price profile.json estimates.csv
        estimator price brain.json costs.json --brain
    """
    with with_error_handling(ctx.obj["debug"]):
        settings = get_config()
        reader = ProfileReader()

        with LogContext(correlation_id=generate_correlation_id(), command="price"):
            if from_brain:
                profile = pricing_profile_from_brain(
                    reader.read_financial_brain(profile_path)
                )
            else:
                profile = reader.read_profile(
                    profile_path,
                    labor_defaults=LaborSettings.from_config(settings),
                )
            breakdowns = reader.read_costs(costs_path)
            total_rounding = (
                rounding if rounding is not None else profile.total_rounding
            )

            results = [
                compute_estimate_price(
                    costs,
                    profile.overhead,
                    profile.pricing_strategy,
                    profile.tax_rules,
                    total_rounding,
                )
                for costs in breakdowns
            ]
            logger.info("Priced %d estimate(s)", len(results))

        if as_json:
            payload = [
                {
                    "subtotal": str(result.subtotal),
                    "tax": str(result.tax),
                    "total": str(result.total),
                    "overhead_recovered": str(result.overhead_recovered),
                }
                for result in results
            ]
            click.echo(json.dumps(payload, indent=2))
            return

        click.echo(
            format_info(
                f"Pricing mode: {profile.pricing_strategy.mode}, "
                f"rounding: {total_rounding}"
            )
        )
        rows = [
            [
                str(index),
                format_money(result.subtotal, settings.currency),
                format_money(result.tax, settings.currency),
                format_money(result.total, settings.currency),
                format_money(result.overhead_recovered, settings.currency),
            ]
            for index, result in enumerate(results, start=1)
        ]
        click.echo(
            format_table(
                ["#", "Subtotal", "Tax", "Total", "Overhead recovered"], rows
            )
        )

        minimum = profile.minimum_job_price
        for index, result in enumerate(results, start=1):
            if result.total < minimum:
                click.echo(
                    format_warning(
                        f"Estimate #{index} is below the minimum job price of "
                        f"{format_money(minimum, settings.currency)}"
                    )
                )
