from __future__ import annotations

import asyncio
import functools
import inspect
import traceback
from collections.abc import Callable
from typing import Any, NoReturn, ParamSpec, TypeVar

from loguru import logger

from failwrap.application.annotators import Annotator
from failwrap.application.wrap import wrap_from
from failwrap.config import get_settings
from failwrap.errors import Error

P = ParamSpec("P")
R = TypeVar("R")


def format_tail(exc: BaseException, *, limit: int | None = None) -> str:
    if limit is None:
        limit = get_settings().traceback_limit
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(tb[-limit:])


def log_error(err: Error, log: Any = logger) -> None:
    """Log *err* with its metadata bound as extra fields.

    Ignorable errors go out at ``ignorable_log_level`` so that sinks alerting
    on ``log_level`` skip them.
    """
    settings = get_settings()
    level = settings.ignorable_log_level if err.ignorable else settings.log_level
    log.bind(
        code=err.code,
        tags=list(err.tags),
        params=dict(err.params),
        ignorable=err.ignorable,
    ).opt(exception=err).log(level, "{}\n{}", err, format_tail(err.cause))


def log_and_wrap(
    exc: BaseException,
    *annotators: Annotator,
    log: Any = logger,  # loguru logger-like
) -> NoReturn:
    wrapped = wrap_from(exc, 1, *annotators)
    log_error(wrapped, log)
    raise wrapped from exc


def wrap_exceptions(*annotators: Annotator) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to log and re-raise escaping errors wrapped with *annotators*."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    wrapped = wrap_from(exc, 1, *annotators)
                    log_error(wrapped)
                    raise wrapped from exc

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                wrapped = wrap_from(exc, 1, *annotators)
                log_error(wrapped)
                raise wrapped from exc

        return sync_wrapper  # type: ignore[return-value]

    return decorator
