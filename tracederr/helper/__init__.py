"""
Helper package for tracederr.
Provides formatting and logging utilities.
"""

from .format import (
    first_exception,
    format_message,
    safe_str,
)

from .logging import (
    TracedErrLogger,
    ColorFormatter,
    get_logger,
    setup_logging,
)

__all__ = [
    # Formatting utilities
    "first_exception",
    "format_message",
    "safe_str",
    # Logging utilities
    "TracedErrLogger",
    "ColorFormatter",
    "get_logger",
    "setup_logging",
]
