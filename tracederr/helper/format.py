"""
Message formatting helpers.
Formatting here never raises: bad format/argument pairs degrade to text.
"""

from typing import Any, Optional, Tuple

from .logging import get_logger

logger = get_logger()


def format_message(format: str, *args: Any) -> str:
    """
    Apply printf-style formatting to a message.

    Without arguments the format is returned as is, so literal "%" signs
    survive. A malformed format/argument pair, or an argument that fails to
    render, does not raise; the result is the raw format followed by a
    %!(BADFORMAT ...) marker listing the args.

    :param format: The format template, e.g. "value %d invalid".
    :param args: Substitution arguments.
    :returns: The formatted text.
    """
    if not args:
        return str(format)

    try:
        if len(args) == 1 and isinstance(args[0], dict):
            return str(format) % args[0]
        return str(format) % args
    except Exception as e:
        # arguments can fail in their own __str__, __repr__ or __format__
        logger.warning("Malformed format string", format=format, error=safe_str(e))
        rendered = ", ".join(_safe_repr(arg) for arg in args)
        return f"{format} %!(BADFORMAT {rendered})"


def first_exception(args: Tuple[Any, ...]) -> Optional[BaseException]:
    """
    Get the first exception among format arguments.

    :param args: Format arguments.
    :returns: The first BaseException instance, or None.
    """
    for arg in args:
        if isinstance(arg, BaseException):
            return arg
    return None


def safe_str(value: Any) -> str:
    """
    Render a value with str(), falling back to "<TypeName>" if that raises.

    :param value: The value to render.
    :returns: The rendered text.
    """
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__}>"
