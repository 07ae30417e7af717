"""Handlers that annotate records with their call site.

Each handler appends a typed tag and then delegates. A tag already present
(from an outer handler of the same kind) is reused, so nesting the same
decorator twice annotates once.
"""

import os
import traceback
from traceback import FrameSummary

from logpipe.core.models import (
    CallerTag,
    CallInfo,
    FuncName,
    Record,
    StackTrace,
    find_last,
)
from logpipe.core.ports import Handler

_SEPARATORS = {os.sep, os.altsep or os.sep, "/"}


def short_filename(filename: str) -> str:
    """Return the parent directory and base name of ``filename``.

    ``/srv/app/pkg/views.py:12`` becomes ``pkg/views.py:12``.
    """
    prev, last = -1, -1
    for i, ch in enumerate(filename):
        if ch in _SEPARATORS:
            prev, last = last, i
    if last < 0:
        return filename
    return filename[prev + 1 :]


class CallerFileHandler:
    """Appends the ``file:line`` of the call site as a CallerTag.

    Args:
        handler: Next handler in the chain.
        short: Keep only the parent directory and file name.
    """

    def __init__(self, handler: Handler, short: bool = True) -> None:
        self._handler = handler
        self.short = short

    def log(self, record: Record) -> None:
        if record.call is not None and find_last(record.attributes, CallerTag) is None:
            caller = str(record.call)
            if self.short:
                caller = short_filename(caller)
            record.attributes.append(CallerTag(caller))
        self._handler.log(record)


class CallerFuncHandler:
    """Appends the qualified name of the calling function under ``fn``."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler

    def log(self, record: Record) -> None:
        if record.call is not None and find_last(record.attributes, FuncName) is None:
            record.attributes.extend(["fn", FuncName(record.call.qualified_function)])
        self._handler.log(record)


def _trim_below(frames: list[FrameSummary], call: CallInfo) -> list[FrameSummary]:
    """Drop the frames more recent than ``call`` and return newest first."""
    for i in range(len(frames) - 1, -1, -1):
        frame = frames[i]
        if frame.filename == call.filename and frame.lineno == call.lineno:
            return frames[i::-1]
    return []


class CallerStackHandler:
    """Appends the call stack, most recent call site first, under ``stack``.

    Sites are rendered with ``site_format`` and joined inside ``[...]``.
    Available fields: ``filename``, ``short``, ``lineno`` and ``function``.
    """

    def __init__(self, handler: Handler, site_format: str = "{short}:{lineno}") -> None:
        self._handler = handler
        self.site_format = site_format

    def log(self, record: Record) -> None:
        if record.call is not None and find_last(record.attributes, StackTrace) is None:
            frames = _trim_below(traceback.extract_stack(), record.call)
            if frames:
                record.attributes.extend(["stack", StackTrace(self._render(frames))])
        self._handler.log(record)

    def _render(self, frames: list[FrameSummary]) -> str:
        sites = (
            self.site_format.format(
                filename=f.filename,
                short=short_filename(f.filename),
                lineno=f.lineno,
                function=f.name,
            )
            for f in frames
        )
        return "[" + " ".join(sites) + "]"
