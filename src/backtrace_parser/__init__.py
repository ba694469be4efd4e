"""Normalize raised-error backtraces into structured stack frames."""

from backtrace_parser._version import __version__
from backtrace_parser.core import BacktraceParser, UnmatchedLinePolicy, is_host_vm_exception, parse
from backtrace_parser.errors import BacktraceError, ConfigurationError, FrameLineNumberError
from backtrace_parser.models import StackFrame

__all__ = [
    "BacktraceError",
    "BacktraceParser",
    "ConfigurationError",
    "FrameLineNumberError",
    "StackFrame",
    "UnmatchedLinePolicy",
    "__version__",
    "is_host_vm_exception",
    "parse",
]
