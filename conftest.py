"""
Global pytest configuration and fixtures.
"""
import json
import os
from decimal import Decimal
from typing import Any, Dict

import pytest

from estimator.config import EstimatorConfig, reload_config
from estimator.models import (
    CostBreakdown,
    MarkupStrategy,
    OverheadConfig,
    TaxRules,
)


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'false',
        'LOG_LEVEL': 'WARNING',
        'LOG_FORMAT': 'standard',
        'CURRENCY': 'CAD',
        'DEFAULT_BURDEN_PERCENT': '18',
        'SALARY_HOURS_PER_YEAR': '2080',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv('LOG_FILE', raising=False)

    # Clear the global config to force reload with test values
    import estimator.config.settings
    estimator.config.settings._config = None

    yield test_env_vars

    # Clean up
    estimator.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> EstimatorConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def scenario_costs() -> CostBreakdown:
    """Cost breakdown of the reference markup-mode job."""
    return CostBreakdown(
        materials=Decimal('1000'),
        labor_hours=Decimal('10'),
        labor_cost_raw=Decimal('500'),
        subs=Decimal('0'),
        equipment=Decimal('0'),
        logistics=Decimal('50'),
    )


@pytest.fixture
def scenario_overhead() -> OverheadConfig:
    """$8,500/month overhead over 160 fully utilized billable hours."""
    return OverheadConfig(
        allocation_method='per-billable-hour',
        fixed_categories=[{'name': 'Monthly overhead', 'amount': 8500}],
        expected_billable_hours_per_period=160,
        utilization_percent=100,
    )


@pytest.fixture
def scenario_markup() -> MarkupStrategy:
    """Markup strategy of the reference job."""
    return MarkupStrategy(
        markup_labor_percent=35,
        markup_materials_percent=30,
        markup_sub_percent=0,
        markup_equipment_percent=0,
        contingency_percent=5,
        include_overhead_in_cost=True,
    )


@pytest.fixture
def no_tax() -> TaxRules:
    """Tax rules with tax disabled."""
    return TaxRules(enabled=False)


@pytest.fixture
def sample_profile_data() -> Dict[str, Any]:
    """Pricing profile document as exported by the settings store."""
    return {
        'overhead': {
            'allocation_method': 'perBillableHour',
            'fixed_categories': [
                {'name': 'Yard lease', 'amount': 6000},
                {'name': 'Insurance', 'amount': 2500},
            ],
            'expected_billable_hours_per_period': 160,
            'utilization_percent': 100,
        },
        'labor': {'burden_percent_default': 20, 'salary_hours_per_year': 2080},
        'pricing_strategy': {
            'mode': 'markup',
            'markup_labor_percent': 35,
            'markup_materials_percent': 30,
            'markup_sub_percent': 0,
            'markup_equipment_percent': 0,
            'contingency_percent': 5,
            'include_overhead_in_cost': True,
        },
        'tax_rules': {'enabled': False, 'tax_rate_percent': 13},
        'total_rounding': 'nearest_1',
        'crew': [
            {'name': 'Sam', 'employment_type': 'hourly', 'base_rate': 30},
            {'name': 'Alex', 'employment_type': 'salary', 'salary_annual': 62400},
            {
                'name': 'Pavers Inc',
                'employment_type': 'subcontract',
                'subcontract_rate': 60,
            },
        ],
    }


@pytest.fixture
def sample_costs_data() -> Dict[str, Any]:
    """Cost breakdown document for the reference job."""
    return {
        'materials': 1000,
        'labor_hours': 10,
        'labor_cost_raw': 500,
        'subs': 0,
        'equipment': 0,
        'logistics': 50,
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""
    def _write(name: str, data: Any) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding='utf-8')
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
