from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from failwrap.domain.ports import Extraction
from failwrap.domain.stacktrace import StackTrace
from failwrap.infrastructure.frames import capture_stack

MESSAGE_DELIMITER = ": "


@dataclass(slots=True, eq=False)
class Error(Exception):
    """An error carrying contextual metadata.

    Attributes:
        cause: The original error, i.e. the root cause.
        messages: Annotated descriptions, most recent first.
        code: Status code to surface in responses, e.g. an HTTP status.
        ignorable: Whether the error should stay out of administrator alerts.
        tags: Classification tags.
        params: Annotated parameters for diagnostics.
        stack_trace: Frames from where the error originated up to the
            latest wrap, innermost first.
    """

    cause: BaseException
    messages: tuple[str, ...] = ()
    code: Any = None
    ignorable: bool = False
    tags: tuple[str, ...] = ()
    params: dict[str, Any] = field(default_factory=dict[str, Any])
    stack_trace: StackTrace = field(default=(), repr=False)

    def __str__(self) -> str:
        if message := self.full_message():
            return message
        return str(self.cause)

    def full_message(self) -> str:
        """Return all messages joined with ``": "``."""
        return MESSAGE_DELIMITER.join(self.messages)

    def last_message(self) -> str:
        """Return the most recently added message, or ``""``."""
        if not self.messages:
            return ""
        return self.messages[0]

    def copy(self) -> Error:
        return Error(
            cause=self.cause,
            messages=self.messages,
            code=self.code,
            ignorable=self.ignorable,
            tags=self.tags,
            params=dict(self.params),
            stack_trace=self.stack_trace,
        )

    def __post_init__(self) -> None:
        self.args = (self.cause,)

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            Error,
            (
                self.cause,
                self.messages,
                self.code,
                self.ignorable,
                self.tags,
                self.params,
                self.stack_trace,
            ),
        )

    def __failwrap_extract__(self) -> Extraction:
        return Extraction(cause=self, message=str(self), stack_trace=self.stack_trace)


def new(text: str) -> Error:
    """Return an error that formats as *text*, traced from the caller."""
    return Error(cause=Exception(text), stack_trace=capture_stack(0))


def format_text(fmt: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    try:
        return fmt.format(*args, **kwargs)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        return f"{fmt} (format error: {exc!r})"


def errorf(fmt: str, *args: Any, **kwargs: Any) -> Error:
    """Like :func:`new`, with the text built by ``fmt.format(*args, **kwargs)``.

    A format that does not fit its arguments does not raise; the failure is
    embedded in the resulting text instead.
    """
    return Error(
        cause=Exception(format_text(fmt, args, kwargs)), stack_trace=capture_stack(0)
    )
