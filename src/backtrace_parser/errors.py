"""Exceptions raised by backtrace-parser.

Unparseable lines and missing traces are not errors; only conditions that
mean a grammar or its input broke its contract are raised.
"""


class BacktraceError(Exception):
    """Base exception for all backtrace-parser errors."""


class FrameLineNumberError(BacktraceError):
    """A captured line number is not a valid non-negative integer.

    Attributes:
        line_text: The captured text that failed to parse.
    """

    def __init__(self, line_text: str) -> None:
        super().__init__(f"Invalid line number in stack frame: {line_text!r}")
        self.line_text = line_text


class ConfigurationError(BacktraceError):
    """Configuration could not be loaded or validated."""
