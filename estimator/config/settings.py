"""
Configuration management for the estimator.

Settings come from environment variables, optionally seeded from a ``.env``
file. Variables already set in the environment win over the file.
"""

from decimal import Decimal
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "testing", "production")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")
CURRENCIES = ("CAD", "USD")


def _one_of(value: str, choices: Sequence[str], label: str) -> str:
    """Match ``value`` case-insensitively against ``choices``."""
    for choice in choices:
        if value.strip().lower() == choice.lower():
            return choice
    raise ValueError(f"{label} must be one of: {list(choices)}")


class EstimatorConfig(BaseSettings):
    """Environment settings for the estimator CLI.

    The estimating defaults apply only where a pricing profile leaves the
    value out.
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="standard", alias="LOG_FORMAT")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    currency: str = Field(default="CAD", alias="CURRENCY")
    default_burden_percent: Decimal = Field(
        default=Decimal("18"), alias="DEFAULT_BURDEN_PERCENT"
    )
    salary_hours_per_year: Decimal = Field(
        default=Decimal("2080"), ge=0, alias="SALARY_HOURS_PER_YEAR"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        return _one_of(v, ENVIRONMENTS, "Environment")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return _one_of(v, LOG_LEVELS, "Log level")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        return _one_of(v, LOG_FORMATS, "Log format")

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        return _one_of(v, CURRENCIES, "Currency")


_config: Optional[EstimatorConfig] = None


def load_config(env_file: Optional[str] = None) -> EstimatorConfig:
    """Read settings, loading ``env_file`` (or ``./.env``) into the environment first."""
    load_dotenv(env_file) if env_file else load_dotenv()
    return EstimatorConfig()


def get_config() -> EstimatorConfig:
    """Return the cached settings, loading them on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> EstimatorConfig:
    """Discard the cached settings and load them again."""
    global _config
    _config = load_config(env_file)
    return _config
