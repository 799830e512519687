"""Fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from estimator.config.logging_config import reset_logging


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def cli_env(mock_env):
    """Run every CLI test with test settings and drop its log handlers afterwards."""
    yield mock_env
    reset_logging()
