"""CLI commands."""

from estimator.cli.commands.brain import financial_brain
from estimator.cli.commands.check import check_setup
from estimator.cli.commands.crew import loaded_rates
from estimator.cli.commands.price import price_estimate

__all__ = ["check_setup", "financial_brain", "loaded_rates", "price_estimate"]
