from __future__ import annotations

from failwrap.domain.ports import Extraction, SupportsExtraction
from failwrap.infrastructure.frames import frames_from_traceback


def extract(err: BaseException) -> Extraction:
    """Recover ``(cause, message, stack_trace)`` from *err*.

    Errors implementing :class:`SupportsExtraction` describe themselves.
    Anything else is its own cause; a raised exception contributes the
    frames of its traceback.
    """
    if isinstance(err, SupportsExtraction):
        return err.__failwrap_extract__()
    return Extraction(
        cause=err,
        message=str(err) or type(err).__name__,
        stack_trace=frames_from_traceback(err.__traceback__),
    )
