"""Centralized logging configuration for the estimator.

Calculators and readers log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; the CLI calls ``configure_logging`` once at
startup with settings taken from ``EstimatorConfig``.
"""

import json
import logging
import logging.handlers
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from estimator.config.settings import EstimatorConfig

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FORMATS = ("standard", "json")

STANDARD_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else was added via extra={}
# or LogContext and belongs in the JSON payload.
_RESERVED_ATTRS = set(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with context fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, STANDARD_DATEFMT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        payload.update(extras)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        # Decimal amounts are written as strings
        return json.dumps(payload, default=str)


@dataclass
class LoggingConfig:
    """Where and how log records are written.

    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (any case)
        log_format: 'standard' or 'json'
        log_file: Rotating log file; file output is on whenever this is set
        enable_console: Write to stderr
        max_file_size: Bytes before the log file rotates
        backup_count: Rotated files to keep
    """

    log_level: str = "INFO"
    log_format: str = "standard"
    log_file: Optional[str] = None
    enable_console: bool = True
    max_file_size: int = 10 * 1024 * 1024
    backup_count: int = 5

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. Must be one of {', '.join(LEVELS)}"
            )

        self.log_format = self.log_format.lower()
        if self.log_format not in FORMATS:
            raise ValueError(
                f"Invalid log format: {self.log_format}. "
                f"Must be one of {', '.join(FORMATS)}"
            )

    @property
    def enable_file(self) -> bool:
        return bool(self.log_file)

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Build from LOG_LEVEL, LOG_FORMAT, LOG_FILE and LOG_CONSOLE."""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=os.getenv("LOG_FILE") or None,
            enable_console=os.getenv("LOG_CONSOLE", "true").lower() == "true",
        )

    @classmethod
    def from_settings(
        cls, settings: "EstimatorConfig", verbose: bool = False
    ) -> "LoggingConfig":
        """Build from application settings.

        Args:
            settings: Loaded EstimatorConfig
            verbose: Force DEBUG level (the CLI's --debug flag)
        """
        return cls(
            log_level="DEBUG" if verbose or settings.debug else settings.log_level,
            log_format=settings.log_format,
            log_file=settings.log_file,
        )


def _clear_root_handlers() -> logging.Logger:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    return root


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if config.enable_console:
        handlers.append(logging.StreamHandler())

    if config.enable_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        )

    return handlers


def configure_logging(config: LoggingConfig) -> None:
    """Install handlers on the root logger according to ``config``.

    Existing root handlers are replaced, so calling this again reconfigures
    logging instead of duplicating output. Every handler carries the filter
    that copies ``LogContext`` fields onto records.
    """
    from estimator.utils.logging_utils import _ContextFilter

    root = _clear_root_handlers()
    level = getattr(logging, config.log_level)
    root.setLevel(level)

    if config.log_format == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)

    context_filter = _ContextFilter()
    for handler in _build_handlers(config):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop all root handlers and go back to the WARNING default."""
    _clear_root_handlers().setLevel(logging.WARNING)
