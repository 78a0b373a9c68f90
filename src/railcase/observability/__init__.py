"""Observability for railcase: structured logging.

Example:
    >>> from railcase.observability import configure_logging, get_logger
    >>> configure_logging(format="json", level="DEBUG")
    >>> get_logger("railcase.result").debug("exception absorbed", step="parse")
"""

from .logging import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)

__all__ = [
    "BoundLogger",
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "NoOpRenderer",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "log_context",
]
