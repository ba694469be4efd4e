"""Parser that turns an exception's backtrace into stack frames.

The grammar is chosen once per exception (see ``core.runtime``) and applied
to every line of its backtrace in order:

- Matched lines become ``StackFrame`` objects
- Unmatched lines are skipped, or kept as placeholder frames when configured
- A captured line number that is not an integer raises ``FrameLineNumberError``
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from backtrace_parser.core.grammar import Captures, Grammar, Matched, match_line
from backtrace_parser.core.runtime import HostVmRuntime, default_runtime
from backtrace_parser.errors import FrameLineNumberError
from backtrace_parser.models.frame import StackFrame
from backtrace_parser.utils.logging import LogEventNames, get_logger

if TYPE_CHECKING:
    from backtrace_parser.config.schema import ParserSettings

log = get_logger(__name__)

LINE_NUMBER_PATTERN = re.compile(r"[0-9]+")


class UnmatchedLinePolicy(StrEnum):
    """What to do with a backtrace line that does not match its grammar."""

    SKIP = "skip"
    PLACEHOLDER = "placeholder"


def parse_line_number(line_text: str) -> int:
    """Parse a captured line number.

    Args:
        line_text: Text captured by a grammar's line group

    Returns:
        The line number

    Raises:
        FrameLineNumberError: If the text is not made of ASCII digits only
    """
    if not LINE_NUMBER_PATTERN.fullmatch(line_text):
        raise FrameLineNumberError(line_text)
    return int(line_text)


def build_frame(captures: Captures) -> StackFrame:
    """Build a stack frame from the captures of a matched line."""
    line = parse_line_number(captures.line_text) if captures.line_text is not None else None
    return StackFrame(file=captures.file, line=line, function=captures.function)


def resolve_backtrace(exception: Any) -> list[str]:
    """Get the raw backtrace lines of an exception-like object.

    The ``backtrace`` attribute may be a sequence of lines, a callable
    returning one, a single multi-line string, or absent.
    """
    raw = getattr(exception, "backtrace", None)
    if callable(raw):
        raw = raw()
    if raw is None:
        return []
    if isinstance(raw, str):
        return raw.splitlines()
    return list(raw)


class BacktraceParser:
    """Parser for exception backtraces.

    Example:
        parser = BacktraceParser()
        frames = parser.parse(exception)
        payload = [frame.to_dict() for frame in frames]
    """

    def __init__(
        self,
        runtime: HostVmRuntime | None = None,
        unmatched_policy: UnmatchedLinePolicy = UnmatchedLinePolicy.SKIP,
    ) -> None:
        """Initialize the parser.

        Args:
            runtime: Host VM capability probe (detected for this interpreter if None)
            unmatched_policy: Handling of lines that match no grammar
        """
        self.runtime = runtime if runtime is not None else default_runtime()
        self.unmatched_policy = unmatched_policy

    @classmethod
    def from_settings(cls, settings: ParserSettings) -> BacktraceParser:
        """Create a parser from loaded settings."""
        runtime = HostVmRuntime.disabled() if settings.host_vm == "disabled" else None
        return cls(runtime=runtime, unmatched_policy=settings.unmatched_line_policy)

    def grammar_for(self, exception: Any) -> Grammar:
        """Grammar applied to every line of the exception's backtrace."""
        return self.runtime.select_grammar(exception)

    def parse(self, exception: Any) -> list[StackFrame]:
        """Parse an exception's backtrace.

        Args:
            exception: Exception-like object exposing a ``backtrace``

        Returns:
            Frames in backtrace order; empty if there is no backtrace

        Raises:
            FrameLineNumberError: If a captured line number is malformed
        """
        lines = resolve_backtrace(exception)
        if not lines:
            log.debug(LogEventNames.BACKTRACE_MISSING, exception_type=type(exception).__name__)
            return []

        grammar = self.grammar_for(exception)
        frames = self.parse_lines(lines, grammar)

        log.debug(
            LogEventNames.BACKTRACE_PARSED,
            grammar=grammar.name,
            lines=len(lines),
            frames=len(frames),
        )
        return frames

    def parse_lines(self, lines: Iterable[str], grammar: Grammar) -> list[StackFrame]:
        """Parse raw backtrace lines with a single grammar.

        Args:
            lines: Raw lines, in backtrace order
            grammar: Grammar to apply to every line

        Returns:
            Frames for the lines kept by the unmatched line policy
        """
        frames: list[StackFrame] = []

        for index, raw_line in enumerate(lines):
            result = match_line(grammar, raw_line)

            if isinstance(result, Matched):
                try:
                    frames.append(build_frame(result.captures))
                except FrameLineNumberError as e:
                    log.warning(
                        LogEventNames.BACKTRACE_LINE_NUMBER_INVALID,
                        grammar=grammar.name,
                        index=index,
                        line_text=e.line_text,
                    )
                    raise
                continue

            log.debug(
                LogEventNames.BACKTRACE_LINE_UNMATCHED,
                grammar=grammar.name,
                index=index,
                raw_line=result.raw_line,
            )
            placeholder = self._placeholder(result.raw_line)
            if placeholder is not None:
                frames.append(placeholder)

        return frames

    def _placeholder(self, raw_line: str) -> StackFrame | None:
        """Frame kept for an unmatched line, if the policy keeps one."""
        if self.unmatched_policy is UnmatchedLinePolicy.SKIP:
            return None

        text = raw_line.strip()
        if not text:
            return None
        return StackFrame(file=None, line=None, function=text)


_default_parser: BacktraceParser | None = None


def _get_default_parser() -> BacktraceParser:
    """Get or create the module-level parser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = BacktraceParser()
    return _default_parser


def parse(exception: Any) -> list[StackFrame]:
    """Parse an exception's backtrace with the default parser."""
    return _get_default_parser().parse(exception)
