"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from estimator.cli.utils.formatters import format_error, format_warning
from estimator.readers.profile_reader import ProfileReadError


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    exit_code = 4
    label = "Error"

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to environment configuration."""

    exit_code = 1
    label = "Configuration Error"


class DataValidationError(CLIError):
    """Error related to profile or cost data."""

    exit_code = 3
    label = "Data Validation Error"


class ProcessingError(CLIError):
    """Error raised while computing results."""

    exit_code = 4
    label = "Processing Error"


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Print a user-friendly message for an error and pick an exit code.

    Exit codes:
        1: configuration error
        3: invalid profile or cost data
        4: processing error
        130: cancelled by the user
        255: unexpected error

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code
    """
    if isinstance(error, ProfileReadError):
        error = DataValidationError(
            error.message,
            recovery_hint=f"Check the file at {error.path}",
        )
    elif isinstance(error, ValidationError):
        error = ConfigurationError(
            str(error), recovery_hint="Check your environment variables and .env file"
        )

    if isinstance(error, CLIError):
        click.echo(format_error(f"{error.label}: {error.message}"), err=True)
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"), err=True)
        return error.exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return 130  # Standard exit code for SIGINT

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
    click.echo(str(error), err=True)

    if debug:
        click.echo("\nFull stack trace:", err=True)
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            ),
            err=True,
        )
    else:
        click.echo(
            format_warning("\nRun with --debug flag for full stack trace"), err=True
        )

    return 255


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        @click.pass_context
        def my_command(ctx):
            with with_error_handling(ctx.obj["debug"]):
                ...
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            # click uses exceptions for normal exits; let those through
            if exc_val is None or isinstance(
                exc_val, (click.exceptions.Exit, click.ClickException, SystemExit)
            ):
                return False
            sys.exit(handle_cli_error(exc_val, self.show_debug))

    return ErrorHandler(debug)
