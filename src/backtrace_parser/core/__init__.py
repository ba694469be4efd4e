"""Core parsing components.

This module exports:
- BacktraceParser: Turns an exception's backtrace into stack frames
- HostVmRuntime: Decides whether an exception comes from the host VM
- Grammar and match_line: The two line grammars and whole-line matching
"""

from backtrace_parser.core.backtrace import (
    BacktraceParser,
    UnmatchedLinePolicy,
    build_frame,
    parse,
    parse_line_number,
)
from backtrace_parser.core.grammar import (
    Captures,
    Grammar,
    Matched,
    MatchResult,
    Unmatched,
    host_vm_grammar,
    match_line,
    native_grammar,
)
from backtrace_parser.core.runtime import HostVmRuntime, is_host_vm_exception

__all__ = [
    "BacktraceParser",
    "Captures",
    "Grammar",
    "HostVmRuntime",
    "MatchResult",
    "Matched",
    "Unmatched",
    "UnmatchedLinePolicy",
    "build_frame",
    "host_vm_grammar",
    "is_host_vm_exception",
    "match_line",
    "native_grammar",
    "parse",
    "parse_line_number",
]
