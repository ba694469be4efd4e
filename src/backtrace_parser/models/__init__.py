"""Data models and transfer objects."""

from .frame import StackFrame

__all__ = [
    "StackFrame",
]
