from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ConfiguredBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Frame(ConfiguredBaseModel):
    """A single call site: file, line and function (qualified name)."""

    file: str
    line: int
    function: str


# Innermost call first.
StackTrace = tuple[Frame, ...]


def _common_suffix_length(a: StackTrace, b: StackTrace) -> int:
    n = 0
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            break
        n += 1
    return n


def merge_stack_traces(original: StackTrace, new: StackTrace) -> StackTrace:
    """Merge a freshly captured *new* trace into *original*.

    The longest common suffix of both traces is the outer call path they
    share. Frames of *new* below that suffix are the call sites between the
    origin of the error and the current wrap; they go between the private
    frames of *original* and the shared suffix. Every frame of *original*
    is kept in order and frames already present are never added twice.
    """
    if not new:
        return original
    if not original:
        return new

    shared = _common_suffix_length(original, new)
    head = original[: len(original) - shared]
    tail = original[len(original) - shared :]

    seen = set(original)
    added: list[Frame] = []
    for frame in new[: len(new) - shared]:
        if frame in seen:
            continue
        seen.add(frame)
        added.append(frame)

    return head + tuple(added) + tail
