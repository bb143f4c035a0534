"""Runtime frame capture backing :mod:`failwrap.domain.stacktrace`."""

from __future__ import annotations

import sys
import traceback
from types import FrameType, TracebackType

from failwrap.config import get_settings
from failwrap.domain.stacktrace import Frame, StackTrace

# capture_stack itself and the function that called it
_OWN_FRAMES = 2


def _to_frame(frame: FrameType, lineno: int) -> Frame:
    code = frame.f_code
    return Frame(file=code.co_filename, line=lineno, function=code.co_qualname)


def capture_stack(skip: int = 0) -> StackTrace:
    """Capture the stack as seen from the caller of the calling function.

    ``skip`` drops that many more frames, so a helper called from a public
    function can record the trace as if the public function's caller had
    called it directly.
    """
    if not get_settings().capture_stack:
        return ()
    try:
        frame: FrameType | None = sys._getframe(_OWN_FRAMES + skip)
    except ValueError:
        return ()

    frames: list[Frame] = []
    while frame is not None:
        frames.append(_to_frame(frame, frame.f_lineno))
        frame = frame.f_back
    return tuple(frames)


def frames_from_traceback(tb: TracebackType | None) -> StackTrace:
    """Return the frames of a raised exception's traceback, innermost first."""
    if tb is None:
        return ()
    frames = [_to_frame(frame, lineno) for frame, lineno in traceback.walk_tb(tb)]
    frames.reverse()
    return tuple(frames)
