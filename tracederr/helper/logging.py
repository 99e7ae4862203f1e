"""
Pretty logging utilities for tracederr.
Colored console output with key=value context, aware of traced errors.
"""

import logging
import sys
from typing import Any, Optional, TextIO


class ColorFormatter(logging.Formatter):
    """
    Colored log formatter for console output.
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[95m",  # Magenta
        "INFO": "\033[94m",  # Blue
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, use_colors: bool = True, include_timestamp: bool = True):
        """
        Initialize the color formatter.

        :param use_colors: Whether to use colors in the output.
        :param include_timestamp: Whether to include timestamps in log messages.
        """
        self.use_colors = use_colors and sys.stderr.isatty()
        self.include_timestamp = include_timestamp

        if include_timestamp:
            fmt = "%(asctime)s %(levelname)s: %(message)s"
        else:
            fmt = "%(levelname)s: %(message)s"

        super().__init__(fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with colors.

        :param record: The log record to format.
        :returns: The formatted log message string.
        """
        formatted = super().format(record)

        if self.use_colors and record.levelname in self.COLORS:
            color = self.COLORS[record.levelname]
            reset = self.COLORS["RESET"]
            parts = formatted.split(": ", 1)
            if len(parts) == 2:
                level_part, message_part = parts
                formatted = f"{color}{level_part}: {reset}{message_part}"

        return formatted


class TracedErrLogger:
    """
    Logger for tracederr.
    Provides leveled logging with context information and renders traced
    errors with their captured stack when debugging.
    """

    def __init__(
        self,
        name: str = "tracederr",
        level: int = logging.WARNING,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize the logger.

        :param name: Logger name.
        :param level: Logging level.
        :param use_colors: Whether to use colored output.
        :param stream: Output stream (defaults to sys.stderr).
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Remove existing handlers to avoid duplicates
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(ColorFormatter(use_colors=use_colors))

        self.logger.addHandler(handler)
        self.logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log debug message with optional context.

        :param message: The log message.
        :param kwargs: Additional context to include in the log.
        """
        self.log_with_context(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message with optional context."""
        self.log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message with optional context."""
        self.log_with_context(logging.WARNING, message, **kwargs)

    def error(
        self, message: str, error: Optional[BaseException] = None, **kwargs: Any
    ) -> None:
        """
        Log error message with optional exception and context.

        When the logger is at DEBUG level and the exception carries a
        captured stack, the stack is appended below the message.

        :param message: The log message.
        :param error: Optional exception to include in the log.
        :param kwargs: Additional context to include in the log.
        """
        self.log_with_context(
            logging.ERROR, self._with_error(message, error), **kwargs
        )

    def critical(
        self, message: str, error: Optional[BaseException] = None, **kwargs: Any
    ) -> None:
        """Log critical message with optional exception and context."""
        self.log_with_context(
            logging.CRITICAL, self._with_error(message, error), **kwargs
        )

    def log_with_context(self, level: int, message: str, **kwargs: Any) -> None:
        """
        Log message with additional context information.

        :param level: Logging level.
        :param message: The log message.
        :param kwargs: Additional context to include in the log.
        """
        if kwargs:
            context_parts = [f"{k}={v}" for k, v in kwargs.items()]
            message += " | " + " ".join(context_parts)

        self.logger.log(level, message)

    def set_level(self, level: int) -> None:
        """Set the logging level."""
        self.logger.setLevel(level)

    def _with_error(self, message: str, error: Optional[BaseException]) -> str:
        if error is None:
            return message
        message = f"{message}: {error}"
        trace_text = getattr(error, "trace_text", None)
        if callable(trace_text) and self.logger.isEnabledFor(logging.DEBUG):
            message = f"{message}\n{trace_text()}".rstrip("\n")
        return message


# Default logger instance
_default_logger: Optional[TracedErrLogger] = None


def get_logger(name: str = "tracederr") -> TracedErrLogger:
    """
    Get or create a logger instance.

    :param name: Logger name.
    :returns: TracedErrLogger instance.
    """
    global _default_logger
    if _default_logger is None or _default_logger.logger.name != name:
        _default_logger = TracedErrLogger(name)
    return _default_logger


def setup_logging(
    level: int = logging.WARNING, use_colors: bool = True, name: str = "tracederr"
) -> TracedErrLogger:
    """
    Setup logging for tracederr.

    :param level: Logging level.
    :param use_colors: Whether to use colors in logs.
    :param name: Logger name.
    :returns: Configured TracedErrLogger instance.
    """
    logger = TracedErrLogger(name, level, use_colors)

    global _default_logger
    _default_logger = logger

    return logger
