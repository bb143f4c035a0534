from __future__ import annotations

from typing import overload

from failwrap.application.annotators import Annotator, with_message
from failwrap.domain.stacktrace import merge_stack_traces
from failwrap.errors import Error
from failwrap.infrastructure.extraction import extract
from failwrap.infrastructure.frames import capture_stack


@overload
def wrap(err: None, *annotators: Annotator) -> None: ...
@overload
def wrap(err: BaseException, *annotators: Annotator) -> Error: ...


def wrap(err: BaseException | None, *annotators: Annotator) -> Error | None:
    """Return *err* as an :class:`Error` traced up to the caller.

    The annotators are applied in order to the returned error. *err* itself
    is never modified. Returns ``None`` if *err* is ``None``.
    """
    if err is None:
        return None

    wrapped = _wrap(err, 1)

    for annotate in annotators:
        annotate(wrapped)

    return wrapped


def wrap_from(err: BaseException, skip: int, *annotators: Annotator) -> Error:
    """Like :func:`wrap`, tracing from *skip* frames above the caller.

    For helpers that wrap on behalf of their own caller.
    """
    wrapped = _wrap(err, skip + 1)

    for annotate in annotators:
        annotate(wrapped)

    return wrapped


def _wrap(err: BaseException, skip: int) -> Error:
    here = capture_stack(skip)

    extraction = extract(err)
    if (inner := unwrap(extraction.cause)) is not None:
        wrapped = inner.copy()
    else:
        wrapped = Error(cause=extraction.cause, stack_trace=extraction.stack_trace)
    # a fresh root error only has its leaf text until first wrapped
    if not wrapped.messages:
        with_message(extraction.message)(wrapped)

    wrapped.stack_trace = merge_stack_traces(wrapped.stack_trace, here)

    return wrapped


def unwrap(err: BaseException | None) -> Error | None:
    """Return *err* if it is an :class:`Error`, otherwise ``None``."""
    if isinstance(err, Error):
        return err
    return None
