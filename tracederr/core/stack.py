"""
Stack capture and resolution.

capture() records caller locations as plain (function, file, line, module)
values without keeping frame objects alive. resolve() turns a captured location into a printable
Frame and falls back to placeholders when a location cannot be resolved.
"""

import inspect
from types import FrameType
from typing import List, Optional, Sequence

from ..helper.logging import get_logger
from ..model.frame import UNKNOWN, Frame, Location

logger = get_logger()


def capture(skip: int, depth: int) -> List[Location]:
    """
    Capture up to depth caller locations, innermost first.

    skip=0 starts at the function that called capture, skip=1 at its caller,
    and so on.

    :param skip: Number of frames to skip above the calling function.
    :param depth: Maximum number of locations to record.
    :returns: The captured locations.
    """
    locations: List[Location] = []
    if depth <= 0:
        return locations

    current_frame = inspect.currentframe()
    frame: Optional[FrameType] = None
    if current_frame is not None:
        frame = current_frame.f_back
    del current_frame

    for _ in range(skip):
        if frame is None:
            break
        frame = frame.f_back

    while frame is not None and len(locations) < depth:
        locations.append(
            Location(
                function=_function_name(frame),
                file=frame.f_code.co_filename,
                lineno=frame.f_lineno,
                module=frame.f_globals.get("__name__"),
            )
        )
        frame = frame.f_back

    return locations


def resolve(location: Location) -> Frame:
    """
    Resolve a captured location into a Frame.

    :param location: The captured location.
    :returns: The resolved frame, with "???" / 0 for anything unknown.
    """
    function = location.function
    if not function or not location.file:
        logger.debug("Unresolvable stack location", location=location)

    if function and location.module:
        function = f"{location.module}.{function}"

    return Frame(
        function=function or UNKNOWN,
        file=location.file or UNKNOWN,
        line=location.lineno or 0,
    )


def resolve_all(locations: Sequence[Location]) -> List[Frame]:
    """Resolve every captured location, in order."""
    return [resolve(location) for location in locations]


def format_frames(frames: Sequence[Frame]) -> str:
    """
    Render frames as trace text.

    :param frames: Frames, innermost first.
    :returns: One "<function>\\n\\t<file>:<line>\\n" block per frame.
    """
    return "".join(frame.format() for frame in frames)


def _function_name(frame: FrameType) -> str:
    code = frame.f_code
    return getattr(code, "co_qualname", None) or code.co_name
