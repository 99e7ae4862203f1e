"""
tracederr - traced error wrappers

Wraps an exception with an optional message and the call stack captured
where it was wrapped:
- new/wrap return None for None, so "no error" stays "no error"
- describe() renders "<message>: <error>"
- trace_text() renders the captured stack, innermost frame first
- is_error/as_error look through any chain of wrappers
"""

from ._version import __version__

# Core exports
from .traced_error import (
    FormattedError,
    TracedError,
    Tracer,
    Unwrapper,
    as_error,
    chain,
    default_tracer,
    describe,
    init,
    is_error,
    new,
    newf,
    trace_text,
    unwrap,
    wrap,
    wrapf,
)

from .model.configuration import (
    DEFAULT_MAX_DEPTH,
    TraceConfiguration,
    new_trace_configuration,
)

from .model.frame import (
    Frame,
    Location,
)

# Import submodules for direct access
from . import core
from . import helper
from . import model

__all__ = [
    # Constructors
    "init",
    "new",
    "newf",
    "wrap",
    "wrapf",
    # Rendering and chain traversal
    "describe",
    "trace_text",
    "unwrap",
    "chain",
    "is_error",
    "as_error",
    # Classes
    "TracedError",
    "FormattedError",
    "Tracer",
    "Unwrapper",
    "default_tracer",
    # Configuration
    "DEFAULT_MAX_DEPTH",
    "TraceConfiguration",
    "new_trace_configuration",
    # Frames
    "Frame",
    "Location",
    # Submodules
    "core",
    "helper",
    "model",
    # Version info
    "__version__",
]
