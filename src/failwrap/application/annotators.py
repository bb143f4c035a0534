"""Single-purpose annotators applied by :func:`failwrap.wrap`.

Each annotator replaces the field it touches instead of mutating it in
place, so copies of one error never see each other's additions.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from failwrap.errors import Error, format_text

Annotator = Callable[[Error], None]


def with_message(text: str) -> Annotator:
    """Prepend *text* to the error's messages."""

    def annotate(err: Error) -> None:
        err.messages = (text, *err.messages)

    return annotate


def with_messagef(fmt: str, *args: Any, **kwargs: Any) -> Annotator:
    return with_message(format_text(fmt, args, kwargs))


def with_code(code: Any) -> Annotator:
    def annotate(err: Error) -> None:
        err.code = code

    return annotate


def with_ignorable(ignorable: bool = True) -> Annotator:
    """Mark the error as (not) worth reporting to administrators."""

    def annotate(err: Error) -> None:
        err.ignorable = ignorable

    return annotate


def with_tags(*tags: str) -> Annotator:
    def annotate(err: Error) -> None:
        added = tuple(t for t in dict.fromkeys(tags) if t not in err.tags)
        err.tags = err.tags + added

    return annotate


def with_params(
    params: Mapping[str, Any] | None = None, /, **kwargs: Any
) -> Annotator:
    """Merge *params* and keyword arguments into the error's params.

    Keyword arguments win over *params*; both win over existing entries.
    """

    def annotate(err: Error) -> None:
        err.params = {**err.params, **(params or {}), **kwargs}

    return annotate


def with_param(key: str, value: Any) -> Annotator:
    return with_params({key: value})
