"""
Traced errors.

A TracedError wraps an exception together with an optional message and the
call stack at the point where it was wrapped. The module-level constructors
share one default Tracer; build a Tracer yourself to use a different
configuration without touching the default.
"""

import threading
from typing import (
    Any,
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    runtime_checkable,
)

from .core.stack import capture, format_frames, resolve_all
from .helper.format import first_exception, format_message, safe_str
from .helper.logging import get_logger
from .model.configuration import TraceConfiguration, new_trace_configuration
from .model.frame import Frame, Location

logger = get_logger()

E = TypeVar("E", bound=BaseException)


@runtime_checkable
class Unwrapper(Protocol):
    """Anything that exposes the error it wraps."""

    def unwrap(self) -> Optional[BaseException]: ...


class FormattedError(Exception):
    """
    Error built from a formatted message.
    If an exception was among the format arguments, it is kept as the
    wrapped cause regardless of the conversion used for it (%s, %r, ...).
    """

    def __init__(self, text: str, wrapped: Optional[BaseException] = None):
        super().__init__(text)
        self.text = text
        self.wrapped = wrapped
        if wrapped is not None:
            self.__cause__ = wrapped

    def __str__(self) -> str:
        return self.text

    def __reduce__(self):
        return (self.__class__, (self.text, self.wrapped))

    def unwrap(self) -> Optional[BaseException]:
        return self.wrapped


class TracedError(Exception):
    """
    Exception wrapper carrying a message and the stack at the wrap site.

    The wrapped error is kept unchanged and returned by unwrap(), so
    is_error() and as_error() can look through any number of wrappers.
    """

    def __init__(
        self,
        err: BaseException,
        message: str = "",
        stack: Optional[Sequence[Location]] = None,
    ):
        """
        Initialize TracedError.

        :param err: The wrapped error, must not be None.
        :param message: Optional annotation, "" for none.
        :param stack: Captured locations; captured from the caller if omitted.
        :raises ValueError: If err is None.
        """
        if err is None:
            raise ValueError("err must not be None")

        if stack is None:
            stack = capture(1, default_tracer().configuration.max_depth)

        self._err = err
        self.message = message
        self._stack: Tuple[Location, ...] = tuple(stack)

        super().__init__(err, message)
        if isinstance(err, BaseException):
            self.__cause__ = err

    @property
    def err(self) -> BaseException:
        """The wrapped error."""
        return self._err

    @property
    def stack(self) -> Tuple[Location, ...]:
        """Locations captured at construction, innermost first."""
        return self._stack

    def describe(self) -> str:
        """
        Get the error text.

        :return: "<message>: <err>" if a message is set, otherwise "<err>".
        """
        if self.message:
            return f"{self.message}: {safe_str(self._err)}"
        return safe_str(self._err)

    def unwrap(self) -> BaseException:
        """Return the wrapped error unchanged."""
        return self._err

    def frames(self) -> List[Frame]:
        """Resolve the captured stack into frames, innermost first."""
        return resolve_all(self._stack)

    def trace_text(self) -> str:
        """
        Render the captured stack.

        :return: One "<function>\\n\\t<file>:<line>\\n" block per frame.
        """
        return format_frames(self.frames())

    def __str__(self) -> str:
        return self.describe()

    def __reduce__(self):
        # keep the captured stack instead of capturing a new one on load
        return (self.__class__, (self._err, self.message, self._stack))

    def __repr__(self) -> str:
        return f"TracedError({self._err!r}, message={self.message!r})"


class Tracer:
    """
    Builds traced errors using one TraceConfiguration.
    """

    def __init__(self, configuration: Optional[TraceConfiguration] = None):
        self.configuration = configuration or TraceConfiguration()

    def new(self, err: Optional[BaseException]) -> Optional[TracedError]:
        """
        Trace an error without a message.

        :param err: The error to wrap.
        :returns: The traced error, or None if err is None.
        """
        if err is None:
            return None
        return self._trace(err, "", skip=1)

    def newf(self, fmt: str, *args: Any) -> TracedError:
        """
        Create a traced error from a formatted message.
        Never returns None. The first exception among args, whatever its
        conversion, becomes the wrapped cause and is found by is_error().

        :param fmt: printf-style format, e.g. "value %d invalid".
        :param args: Format arguments.
        :returns: The traced error.
        """
        err = FormattedError(format_message(fmt, *args), first_exception(args))
        return self._trace(err, "", skip=1)

    def wrap(self, err: Optional[BaseException], message: str) -> Optional[TracedError]:
        """
        Trace an error with a message.

        :param err: The error to wrap.
        :param message: The annotation.
        :returns: The traced error, or None if err is None.
        """
        if err is None:
            return None
        return self._trace(err, message, skip=1)

    def wrapf(
        self, err: Optional[BaseException], fmt: str, *args: Any
    ) -> Optional[TracedError]:
        """
        Trace an error with a formatted message.

        :param err: The error to wrap.
        :param fmt: printf-style format for the message.
        :param args: Format arguments.
        :returns: The traced error, or None if err is None.
        """
        if err is None:
            return None
        return self._trace(err, format_message(fmt, *args), skip=1)

    def _trace(self, err: BaseException, message: str, skip: int) -> TracedError:
        # skip counts frames above our caller; +1 accounts for this method
        stack = capture(skip + 1, self.configuration.max_depth)
        return TracedError(err, message, stack=stack)


_tracer_lock = threading.RLock()
_default_tracer = Tracer()


def init(depth: int) -> None:
    """
    Set the maximum stack depth used by the module-level constructors.
    Call it once at startup, before errors are created.

    :param depth: Maximum number of frames captured per traced error.
    :raises ValueError: If depth is not a positive integer.
    """
    global _default_tracer
    tracer = Tracer(new_trace_configuration(depth))
    with _tracer_lock:
        _default_tracer = tracer
    logger.debug("Configured stack depth", max_depth=depth)


def default_tracer() -> Tracer:
    """Get the tracer used by the module-level constructors."""
    return _default_tracer


def new(err: Optional[BaseException]) -> Optional[TracedError]:
    """
    Trace an error without a message.

    :param err: The error to wrap.
    :returns: The traced error, or None if err is None.
    """
    if err is None:
        return None
    return _default_tracer._trace(err, "", skip=1)


def newf(fmt: str, *args: Any) -> TracedError:
    """
    Create a traced error from a formatted message. Never returns None.
    The first exception among args, whatever its conversion, becomes the
    wrapped cause and is found by is_error().

    :param fmt: printf-style format, e.g. "value %d invalid".
    :param args: Format arguments.
    :returns: The traced error.
    """
    err = FormattedError(format_message(fmt, *args), first_exception(args))
    return _default_tracer._trace(err, "", skip=1)


def wrap(err: Optional[BaseException], message: str) -> Optional[TracedError]:
    """
    Trace an error with a message.

    :param err: The error to wrap.
    :param message: The annotation.
    :returns: The traced error, or None if err is None.
    """
    if err is None:
        return None
    return _default_tracer._trace(err, message, skip=1)


def wrapf(err: Optional[BaseException], fmt: str, *args: Any) -> Optional[TracedError]:
    """
    Trace an error with a formatted message.

    :param err: The error to wrap.
    :param fmt: printf-style format for the message.
    :param args: Format arguments.
    :returns: The traced error, or None if err is None.
    """
    if err is None:
        return None
    return _default_tracer._trace(err, format_message(fmt, *args), skip=1)


def describe(err: Optional[BaseException]) -> str:
    """Error text, "" for None."""
    if err is None:
        return ""
    if isinstance(err, TracedError):
        return err.describe()
    return safe_str(err)


def trace_text(err: Optional[BaseException]) -> str:
    """Captured stack of a traced error, "" for None or untraced errors."""
    if isinstance(err, TracedError):
        return err.trace_text()
    return ""


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    Get the error wrapped by err.

    :returns: The wrapped error, or None if err wraps nothing.
    """
    if err is None or not isinstance(err, Unwrapper):
        return None
    return err.unwrap()


def chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """
    Iterate err and every error reachable through unwrap(), outermost first.
    Stops at the first repeated error.
    """
    seen = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def is_error(err: Optional[BaseException], target: Optional[BaseException]) -> bool:
    """
    Check whether target is err or anything err wraps.

    :param err: The outermost error.
    :param target: The error to look for, compared by identity or equality.
    :returns: True if target is in the chain.
    """
    if target is None:
        return err is None
    return any(e is target or e == target for e in chain(err))


def as_error(err: Optional[BaseException], cls: Type[E]) -> Optional[E]:
    """
    Find the first error in the chain that is an instance of cls.

    :param err: The outermost error.
    :param cls: The exception class to look for.
    :returns: The matching error, or None.
    """
    for e in chain(err):
        if isinstance(e, cls):
            return e
    return None
