"""Line grammars for the two supported backtrace formats.

A grammar is a whole-line pattern with three named groups: ``file``,
``line`` and ``function``. Matching a raw line yields either ``Matched``
with its captures or ``Unmatched``; callers must handle both, so a failed
match can never reach the frame builder.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cache


@dataclass(frozen=True)
class Grammar:
    """A named, pre-compiled stack frame pattern."""

    name: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class Captures:
    """Substrings extracted from a matched stack frame line."""

    file: str
    line_text: str | None
    function: str


@dataclass(frozen=True)
class Matched:
    """The line matched its grammar."""

    captures: Captures


@dataclass(frozen=True)
class Unmatched:
    """The line did not match its grammar."""

    raw_line: str


MatchResult = Matched | Unmatched


@cache
def native_grammar() -> Grammar:
    """Grammar for native frames, e.g.
    ``./spec/notice_spec.rb:43:in `block (3 levels) in <top (required)>'``.

    The file group is greedy because paths may contain colons.
    """
    return Grammar(
        name="native",
        pattern=re.compile(
            r"""
            (?P<file>.+)        # ./spec/notice_spec.rb
            :
            (?P<line>[0-9]+)    # 43
            :in\s
            `(?P<function>.+)'  # `block (3 levels) in <top (required)>'
            """,
            re.VERBOSE,
        ),
    )


@cache
def host_vm_grammar() -> Grammar:
    """Grammar for host-VM frames, e.g.
    ``org.jruby.ast.NewlineNode.interpret(NewlineNode.java:105)``.

    The line segment is optional (``Foo.bar(Foo.java)``, ``Foo.bar(Native Method)``).
    """
    return Grammar(
        name="host_vm",
        pattern=re.compile(
            r"""
            (?P<function>.+)        # org.jruby.ast.NewlineNode.interpret
            \(
                (?P<file>[^:]+)     # NewlineNode.java
                :?
                (?P<line>[0-9]+)?   # 105
            \)
            """,
            re.VERBOSE,
        ),
    )


def match_line(grammar: Grammar, raw_line: str) -> MatchResult:
    """Match a raw backtrace line against a grammar.

    Args:
        grammar: Grammar chosen for the whole backtrace
        raw_line: One line of the backtrace

    Returns:
        Matched with captures, or Unmatched if the whole line does not fit
    """
    match = grammar.pattern.fullmatch(raw_line)
    if match is None:
        return Unmatched(raw_line=raw_line)

    return Matched(
        captures=Captures(
            file=match.group("file"),
            line_text=match.group("line"),
            function=match.group("function"),
        )
    )
