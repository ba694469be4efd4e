"""Tests for host VM runtime detection."""

import sys
import types

import pytest

from backtrace_parser.core.grammar import host_vm_grammar, native_grammar
from backtrace_parser.core.runtime import HostVmRuntime, is_host_vm_exception


class FakeThrowable(Exception):
    """Stand-in for the host VM's native throwable type."""


class TestHostVmRuntimeUnavailable:
    """Tests for environments without a host VM."""

    @pytest.fixture
    def runtime(self) -> HostVmRuntime:
        """Create a runtime without a throwable type."""
        return HostVmRuntime()

    def test_not_available(self, runtime: HostVmRuntime) -> None:
        """Test the capability is reported missing."""
        assert runtime.available is False

    @pytest.mark.parametrize(
        "value",
        [ValueError("boom"), FakeThrowable(), None, object(), "text", 42],
    )
    def test_never_host_vm_exception(self, runtime: HostVmRuntime, value: object) -> None:
        """Test any input is rejected without raising."""
        assert runtime.is_host_vm_exception(value) is False

    def test_selects_native_grammar(self, runtime: HostVmRuntime) -> None:
        """Test the native grammar is always chosen."""
        assert runtime.select_grammar(FakeThrowable()) is native_grammar()

    def test_disabled_runtime(self) -> None:
        """Test the explicit disabled constructor."""
        assert HostVmRuntime.disabled().available is False


class TestHostVmRuntimeAvailable:
    """Tests for environments with a host VM throwable type."""

    @pytest.fixture
    def runtime(self) -> HostVmRuntime:
        """Create a runtime with a fake throwable type."""
        return HostVmRuntime(throwable_type=FakeThrowable)

    def test_available(self, runtime: HostVmRuntime) -> None:
        """Test the capability is reported present."""
        assert runtime.available is True

    def test_throwable_instance(self, runtime: HostVmRuntime) -> None:
        """Test a throwable instance is a host VM exception."""
        assert runtime.is_host_vm_exception(FakeThrowable()) is True

    def test_wrapped_throwable(self, runtime: HostVmRuntime) -> None:
        """Test an exception caused by a throwable is a host VM exception."""
        try:
            try:
                raise FakeThrowable("java side")
            except FakeThrowable as e:
                raise RuntimeError("ruby side") from e
        except RuntimeError as wrapper:
            assert runtime.is_host_vm_exception(wrapper) is True

    def test_throwable_in_context(self, runtime: HostVmRuntime) -> None:
        """Test an exception raised while handling a throwable is a host VM exception."""
        try:
            try:
                raise FakeThrowable("java side")
            except FakeThrowable:
                raise RuntimeError("during handling")
        except RuntimeError as wrapper:
            assert runtime.is_host_vm_exception(wrapper) is True

    def test_throwable_deep_in_cause_chain(self, runtime: HostVmRuntime) -> None:
        """Test a throwable several causes down is found."""
        outer = RuntimeError("outer")
        middle = ValueError("middle")
        outer.__cause__ = middle
        middle.__cause__ = FakeThrowable("java side")

        assert runtime.is_host_vm_exception(outer) is True

    def test_cyclic_chain_without_throwable(self, runtime: HostVmRuntime) -> None:
        """Test a cause cycle terminates and reports no host VM exception."""
        first = RuntimeError("first")
        second = ValueError("second")
        first.__cause__ = second
        second.__context__ = first

        assert runtime.is_host_vm_exception(first) is False

    def test_plain_exception(self, runtime: HostVmRuntime) -> None:
        """Test an unrelated exception is not a host VM exception."""
        assert runtime.is_host_vm_exception(ValueError("boom")) is False

    def test_non_exception_value(self, runtime: HostVmRuntime) -> None:
        """Test values without a cause are handled."""
        assert runtime.is_host_vm_exception(object()) is False

    def test_selects_grammar_per_exception(self, runtime: HostVmRuntime) -> None:
        """Test the grammar follows the exception's origin."""
        assert runtime.select_grammar(FakeThrowable()) is host_vm_grammar()
        assert runtime.select_grammar(ValueError()) is native_grammar()


class TestHostVmRuntimeDetect:
    """Tests for detecting the host VM from the running interpreter."""

    def test_detect_outside_jvm(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test detection on a regular interpreter."""
        monkeypatch.setattr(sys, "platform", "linux")

        assert HostVmRuntime.detect().available is False

    def test_detect_jvm_without_java_package(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test detection when the platform claims a JVM but java.lang is missing."""
        monkeypatch.setattr(sys, "platform", "java1.8.0_292")
        monkeypatch.setitem(sys.modules, "java", None)

        assert HostVmRuntime.detect().available is False

    def test_detect_jvm_with_throwable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test detection resolves java.lang.Throwable on a JVM."""
        java = types.ModuleType("java")
        java_lang = types.ModuleType("java.lang")
        java_lang.Throwable = FakeThrowable  # type: ignore[attr-defined]
        java.lang = java_lang  # type: ignore[attr-defined]

        monkeypatch.setattr(sys, "platform", "java1.8.0_292")
        monkeypatch.setitem(sys.modules, "java", java)
        monkeypatch.setitem(sys.modules, "java.lang", java_lang)

        runtime = HostVmRuntime.detect()

        assert runtime.throwable_type is FakeThrowable
        assert runtime.is_host_vm_exception(FakeThrowable()) is True


class TestIsHostVmException:
    """Tests for the module-level predicate."""

    def test_false_on_current_interpreter(self) -> None:
        """Test no exception is a host VM exception outside a JVM."""
        assert is_host_vm_exception(RuntimeError("boom")) is False

    def test_false_for_arbitrary_values(self) -> None:
        """Test arbitrary values never raise."""
        assert is_host_vm_exception(None) is False
        assert is_host_vm_exception("not an exception") is False
