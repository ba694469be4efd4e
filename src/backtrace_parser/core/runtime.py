"""Runtime detection for choosing a backtrace grammar.

Whether the host VM's throwable type exists is decided once, when a
``HostVmRuntime`` is built. Checking an exception against it afterwards
never performs a type lookup and never raises.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cache
from typing import Any

from backtrace_parser.core.grammar import Grammar, host_vm_grammar, native_grammar
from backtrace_parser.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class HostVmRuntime:
    """Capability probe for a host virtual machine's native throwable type.

    Example:
        runtime = HostVmRuntime.detect()
        if runtime.is_host_vm_exception(exc):
            ...
    """

    throwable_type: type | None = None

    @classmethod
    def detect(cls) -> HostVmRuntime:
        """Resolve the host VM throwable type for the running interpreter.

        Only a JVM-hosted interpreter exposes ``java.lang.Throwable``; on any
        other platform nothing is imported and the capability is unavailable.
        """
        if not sys.platform.startswith("java"):
            return cls()

        try:
            from java.lang import Throwable  # type: ignore[import-not-found]
        except ImportError:
            log.debug(LogEventNames.HOST_VM_THROWABLE_UNAVAILABLE, platform=sys.platform)
            return cls()

        return cls(throwable_type=Throwable)

    @classmethod
    def disabled(cls) -> HostVmRuntime:
        """A runtime that never reports host-VM exceptions."""
        return cls()

    @property
    def available(self) -> bool:
        """Whether the host VM throwable type exists in this environment."""
        return self.throwable_type is not None

    def is_host_vm_exception(self, exception: Any) -> bool:
        """Check whether an exception is, or wraps, a host VM throwable.

        Args:
            exception: Exception-like object

        Returns:
            True only if the capability is available and the exception, or
            any exception in its ``__cause__``/``__context__`` chain, is an
            instance of the throwable type
        """
        if self.throwable_type is None:
            return False

        pending = [exception]
        seen: set[int] = set()
        while pending:
            current = pending.pop()
            if current is None or id(current) in seen:
                continue
            seen.add(id(current))

            if isinstance(current, self.throwable_type):
                return True

            pending.append(getattr(current, "__context__", None))
            pending.append(getattr(current, "__cause__", None))

        return False

    def select_grammar(self, exception: Any) -> Grammar:
        """Choose the grammar used for every line of an exception's backtrace."""
        if self.is_host_vm_exception(exception):
            return host_vm_grammar()
        return native_grammar()


@cache
def default_runtime() -> HostVmRuntime:
    """The runtime detected for the current interpreter."""
    return HostVmRuntime.detect()


def is_host_vm_exception(exception: Any) -> bool:
    """Check whether an exception originates from the host VM.

    Args:
        exception: Exception-like object

    Returns:
        False whenever no host VM is present, without raising
    """
    return default_runtime().is_host_vm_exception(exception)
