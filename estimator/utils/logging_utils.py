"""Structured logging helpers: context fields, correlation IDs, call tracing."""

import contextvars
import functools
import logging
import uuid
from typing import Any, Callable, Dict, Optional

_log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "estimator_log_context", default={}
)


def generate_correlation_id() -> str:
    """Return a fresh UUID4 string identifying one CLI run."""
    return str(uuid.uuid4())


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently added to log records."""
    return dict(_log_context.get())


def get_correlation_id() -> Optional[str]:
    """Correlation ID of the enclosing LogContext, if any."""
    return _log_context.get().get("correlation_id")


class LogContext:
    """
    Attach structured fields to every log record emitted inside the block.

    Nested contexts extend the enclosing one; leaving a block restores the
    fields that were active before it, also when the block raises. The
    fields reach handlers through the filter installed by configure_logging().

    Example:
        with LogContext(correlation_id=generate_correlation_id(), command="price"):
            profile = ProfileReader().read_profile(path)
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self.fields})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


class _ContextFilter(logging.Filter):
    """Copy the active LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.__dict__.update(_log_context.get())
        return True


def _describe_call(name: str, args: tuple, kwargs: dict) -> str:
    parts = [repr(arg) for arg in args]
    parts.extend(f"{key}={value!r}" for key, value in kwargs.items())
    return f"{name}({', '.join(parts)})"


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Trace entry to and exit from a function; log and re-raise its exceptions.

    Usable bare (``@log_function_call``) or with options.

    Args:
        func: Decorated function when used bare
        include_args: Put the call's arguments in the entry message
        level: Level name for the entry/exit messages

    Example:
        @log_function_call(include_args=True, level="INFO")
        def read_costs(path):
            ...
    """
    numeric_level = logging.getLevelName(level.upper())

    def decorator(target: Callable) -> Callable:
        logger = logging.getLogger(target.__module__)

        @functools.wraps(target)
        def wrapper(*args, **kwargs):
            if include_args:
                logger.log(
                    numeric_level,
                    "Entering %s",
                    _describe_call(target.__name__, args, kwargs),
                )
            else:
                logger.log(numeric_level, "Entering %s", target.__name__)

            try:
                result = target(*args, **kwargs)
            except Exception as exc:
                logger.error(
                    "Exception in %s: %s: %s",
                    target.__name__,
                    type(exc).__name__,
                    exc,
                    exc_info=True,
                )
                raise

            logger.log(numeric_level, "Exiting %s", target.__name__)
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
