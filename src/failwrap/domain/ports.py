from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from failwrap.domain.stacktrace import StackTrace


@dataclass(frozen=True, slots=True)
class Extraction:
    """Structure recovered from an arbitrary error.

    Attributes:
        cause: The error to treat as the inner cause.
        message: Text describing the cause on its own.
        stack_trace: Frames already known for the cause, innermost first.
    """

    cause: BaseException
    message: str
    stack_trace: StackTrace = ()


@runtime_checkable
class SupportsExtraction(Protocol):
    """Errors that expose their own cause, message and stack trace."""

    def __failwrap_extract__(self) -> Extraction: ...  # pragma: no cover
