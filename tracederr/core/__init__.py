"""
Core components: stack capture and resolution.
"""

from .stack import capture, format_frames, resolve, resolve_all

__all__ = [
    "capture",
    "format_frames",
    "resolve",
    "resolve_all",
]
