"""
Model package for tracederr.

Contains the configuration and stack frame data objects.
"""

from .configuration import (
    DEFAULT_MAX_DEPTH,
    TraceConfiguration,
    new_trace_configuration,
)
from .frame import UNKNOWN, Frame, Location

__all__ = [
    # Configuration
    "DEFAULT_MAX_DEPTH",
    "TraceConfiguration",
    "new_trace_configuration",
    # Frames
    "UNKNOWN",
    "Frame",
    "Location",
]
