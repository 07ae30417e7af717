"""Composable handlers.

Each decorator wraps one or more inner handlers and is itself a handler, so
pipelines are built by nesting::

    handler = LvlFilterHandler(
        Level.INFO,
        CallerFileHandler(SyncHandler(StreamHandler(sys.stderr, LogfmtFormat()))),
    )

Exceptions raised by inner handlers propagate unchanged.
"""

import io
import threading
from collections.abc import Callable
from typing import BinaryIO, TextIO

from logpipe.core.errors import MultiHandlerError
from logpipe.core.levels import Level, parse_level
from logpipe.core.models import Record
from logpipe.core.ports import Format, Handler


class FuncHandler:
    """Adapts a plain ``Record -> None`` callable to the Handler port."""

    def __init__(self, func: Callable[[Record], None]) -> None:
        self._func = func

    def log(self, record: Record) -> None:
        self._func(record)


class DiscardHandler:
    """Drops every record."""

    def log(self, record: Record) -> None:
        return None


class StreamHandler:
    """Formats records and writes them to a stream.

    Text streams receive the decoded text, anything else the encoded bytes.
    Write errors propagate. Not thread-safe: wrap in ``SyncHandler`` when
    several threads share the stream.

    Args:
        stream: Destination, e.g. ``sys.stderr`` or an open binary file.
        fmt: Encoder producing the bytes of each record.
    """

    def __init__(self, stream: BinaryIO | TextIO, fmt: Format) -> None:
        self._stream = stream
        self._fmt = fmt

    def log(self, record: Record) -> None:
        data = self._fmt.format(record)
        if isinstance(self._stream, io.TextIOBase):
            self._stream.write(data.decode("utf-8", "replace"))
        else:
            self._stream.write(data)


class LvlFilterHandler:
    """Forwards only records at least as severe as ``level``.

    Args:
        level: Threshold, as a Level or a parseable level name.
        handler: Receives the records that pass.

    Raises:
        InvalidLevelError: if ``level`` is a string naming no level.
    """

    def __init__(self, level: Level | str, handler: Handler) -> None:
        self.level = parse_level(level) if isinstance(level, str) else Level(level)
        self._handler = handler

    def log(self, record: Record) -> None:
        if record.level <= self.level:
            self._handler.log(record)


class SyncHandler:
    """Serializes calls to the inner handler under a lock."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self._lock = threading.Lock()

    def log(self, record: Record) -> None:
        with self._lock:
            self._handler.log(record)


class MultiHandler:
    """Delivers each record to every inner handler, in order.

    A failing handler does not stop delivery to the following ones. All
    failures are raised together as a ``MultiHandlerError``.
    """

    def __init__(self, *handlers: Handler) -> None:
        self._handlers = handlers

    def log(self, record: Record) -> None:
        errors: list[Exception] = []
        for handler in self._handlers:
            try:
                handler.log(record)
            except Exception as e:
                errors.append(e)
        if errors:
            raise MultiHandlerError(
                f"{len(errors)} of {len(self._handlers)} handlers failed", errors
            )


class SwapHandler:
    """Handler reference that can be replaced while in use.

    Loggers sharing one SwapHandler all switch pipelines on ``swap``.
    """

    def __init__(self, handler: Handler | None = None) -> None:
        self._handler: Handler = handler if handler is not None else DiscardHandler()

    def get(self) -> Handler:
        return self._handler

    def swap(self, handler: Handler) -> None:
        self._handler = handler

    def log(self, record: Record) -> None:
        self._handler.log(record)
