"""Shared test fixtures for backtrace-parser."""

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore the default structlog and root logger configuration after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class ReportedError(Exception):
    """Exception carrying a raw backtrace, as handed over by an error reporter."""

    def __init__(self, message: str = "Oops!", backtrace: Any = None) -> None:
        super().__init__(message)
        self.backtrace = backtrace


@pytest.fixture
def make_exception() -> Callable[..., ReportedError]:
    """Return a factory for exceptions with a given backtrace."""

    def factory(backtrace: Any = None, message: str = "Oops!") -> ReportedError:
        return ReportedError(message, backtrace=backtrace)

    return factory


@pytest.fixture
def native_backtrace() -> list[str]:
    """Return a backtrace in the native format."""
    return [
        "./spec/notice_spec.rb:43:in `block (3 levels) in <top (required)>'",
        "/home/app/lib/airbrake.rb:10:in `notify'",
        "C:/Ruby/lib/ruby/2.3.0/rubygems/core_ext/kernel_require.rb:55:in `require'",
    ]


@pytest.fixture
def host_vm_backtrace() -> list[str]:
    """Return a backtrace in the host-VM (JVM) format."""
    return [
        "org.jruby.ast.NewlineNode.interpret(NewlineNode.java:105)",
        "org.jruby.RubyKernel.raise(RubyKernel.java)",
        "java.lang.Thread.run(Native Method)",
    ]
