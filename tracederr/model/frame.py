"""
Stack location and frame models.

A Location is what gets captured when a traced error is built: the raw
names and line read off the frame, kept as plain values so traced errors
stay picklable. A Frame is the resolved, printable form.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


UNKNOWN = "???"


@dataclass(frozen=True)
class Location:
    """A captured call site, resolved lazily into a Frame."""

    function: Optional[str]
    file: Optional[str]
    lineno: Optional[int]
    module: Optional[str] = None


@dataclass(frozen=True)
class Frame:
    """A resolved stack frame."""

    function: str = UNKNOWN
    file: str = UNKNOWN
    line: int = 0

    def format(self) -> str:
        """
        Render the frame as a trace block.

        :return: "<function>\\n\\t<file>:<line>\\n"
        """
        return f"{self.function}\n\t{self.file}:{self.line}\n"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "function": self.function,
            "file": self.file,
            "line": self.line,
        }
