"""
Configuration model for traced errors.
Holds the settings every traced error constructor reads.
"""

from dataclasses import dataclass
from typing import Any, Dict


DEFAULT_MAX_DEPTH = 32


@dataclass(frozen=True)
class TraceConfiguration:
    """
    Settings for stack capture.

    max_depth is the maximum number of frames recorded per traced error.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(
                f"max depth must be an integer, got {type(self.max_depth).__name__}"
            )
        if self.max_depth < 1:
            raise ValueError("max depth must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary.

        :return: Dictionary representation of the TraceConfiguration.
        """
        return {"max_depth": self.max_depth}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TraceConfiguration":
        """
        Create TraceConfiguration from dictionary.

        :param data: Dictionary containing configuration data.
        :return: TraceConfiguration instance.
        """
        return cls(max_depth=data.get("max_depth", DEFAULT_MAX_DEPTH))


def new_trace_configuration(max_depth: int = DEFAULT_MAX_DEPTH) -> TraceConfiguration:
    """
    Create a new trace configuration.

    :param max_depth: Maximum number of frames captured per traced error.
    :return: TraceConfiguration instance.
    :raises ValueError: If max_depth is not a positive integer.
    """
    return TraceConfiguration(max_depth=max_depth)
