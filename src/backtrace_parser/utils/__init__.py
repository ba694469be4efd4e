"""Utility functions and helpers.

- logging: Structured logging configuration and event names
"""

from backtrace_parser.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    configure_logging,
    get_logger,
)

__all__ = [
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "configure_logging",
    "get_logger",
]
