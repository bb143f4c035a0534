"""Errors that carry context, classification and a stack trace as they propagate."""

from __future__ import annotations

from .application.annotators import (
    Annotator,
    with_code,
    with_ignorable,
    with_message,
    with_messagef,
    with_param,
    with_params,
    with_tags,
)
from .application.wrap import unwrap, wrap
from .domain.stacktrace import Frame, StackTrace
from .errors import Error, errorf, new
from .infrastructure.error_utils import log_and_wrap, log_error, wrap_exceptions

__all__ = [
    "Annotator",
    "Error",
    "Frame",
    "StackTrace",
    "errorf",
    "log_and_wrap",
    "log_error",
    "new",
    "unwrap",
    "with_code",
    "with_ignorable",
    "with_message",
    "with_messagef",
    "with_param",
    "with_params",
    "with_tags",
    "wrap",
    "wrap_exceptions",
]
