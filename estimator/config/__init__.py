"""Settings and logging setup for the estimator."""

from .logging_config import LoggingConfig, configure_logging, get_logger
from .settings import EstimatorConfig, get_config, load_config, reload_config

__all__ = [
    "EstimatorConfig",
    "LoggingConfig",
    "configure_logging",
    "get_config",
    "get_logger",
    "load_config",
    "reload_config",
]
