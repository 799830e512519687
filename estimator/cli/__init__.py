"""Estimator CLI.

This module provides a command-line interface for the estimating core.
It includes commands for pricing estimates, listing crew loaded rates,
checking financial setup and computing the Financial Brain summary.
"""

import click

from estimator import __version__
from estimator.cli.commands.brain import financial_brain
from estimator.cli.commands.check import check_setup
from estimator.cli.commands.crew import loaded_rates
from estimator.cli.commands.price import price_estimate
from estimator.cli.error_handlers import with_error_handling
from estimator.config.logging_config import LoggingConfig, configure_logging
from estimator.config.settings import get_config


@click.group(
    help="Hardscape Estimator CLI - Price estimates from company financial settings"
)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Debug logging and full stack traces")
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """Estimator CLI main entry point."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    with with_error_handling(debug):
        configure_logging(LoggingConfig.from_settings(get_config(), verbose=debug))


# Register commands
cli.add_command(price_estimate)
cli.add_command(loaded_rates)
cli.add_command(check_setup)
cli.add_command(financial_brain)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
