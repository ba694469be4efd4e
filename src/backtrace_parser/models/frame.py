"""Data models for parsed backtrace frames."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class StackFrame:
    """A single frame in a parsed backtrace."""

    file: str | None
    line: int | None
    function: str

    def __post_init__(self) -> None:
        if not self.function:
            raise ValueError("Stack frame function must be a non-empty string")

    @property
    def is_placeholder(self) -> bool:
        """Check if this frame stands in for a line that could not be parsed."""
        return self.file is None and self.line is None

    def to_dict(self) -> dict[str, Any]:
        """Backtrace entry in the shape error reports expect."""
        return asdict(self)
