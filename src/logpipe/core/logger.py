"""Logger: builds records and hands them to a pipeline."""

from datetime import datetime
from typing import Any

from logpipe.core.handlers import SwapHandler
from logpipe.core.levels import Level
from logpipe.core.models import DEFAULT_KEY_NAMES, CallInfo, KeyNames, Record
from logpipe.core.ports import Handler


class Logger:
    """Emits records carrying a bound context to a replaceable handler.

    Children created with ``new`` extend the context and share the parent's
    handler, so ``set_handler`` on either affects both. Handler exceptions
    propagate to the logging call.

    Example:
        ```python
        log = Logger("component", "db")
        log.set_handler(StreamHandler(sys.stderr, LogfmtFormat()))
        log.info("connected", "host", "localhost", "port", 5432)
        ```
    """

    def __init__(
        self,
        *context: Any,
        handler: Handler | None = None,
        key_names: KeyNames = DEFAULT_KEY_NAMES,
    ) -> None:
        self._context = list(context)
        self._handler = SwapHandler(handler)
        self.key_names = key_names

    @property
    def context(self) -> list[Any]:
        return list(self._context)

    def new(self, *context: Any) -> "Logger":
        """Return a child logger with ``context`` appended."""
        child = Logger(*self._context, *context, key_names=self.key_names)
        child._handler = self._handler
        return child

    def get_handler(self) -> Handler:
        return self._handler.get()

    def set_handler(self, handler: Handler) -> None:
        self._handler.swap(handler)

    def copy_from(self, other: "Logger") -> None:
        """Overwrite this logger in place with the state of ``other``."""
        self._context = list(other._context)
        self._handler = other._handler
        self.key_names = other.key_names

    def _write(self, level: Level, msg: str, context: tuple[Any, ...]) -> None:
        record = Record(
            time=datetime.now().astimezone(),
            level=level,
            message=msg,
            attributes=[*self._context, *context],
            call=CallInfo.capture(2),
            key_names=self.key_names,
        )
        self._handler.log(record)

    def log(self, level: Level, msg: str, *context: Any) -> None:
        self._write(level, msg, context)

    def trace(self, msg: str, *context: Any) -> None:
        self._write(Level.TRACE, msg, context)

    def debug(self, msg: str, *context: Any) -> None:
        self._write(Level.DEBUG, msg, context)

    def info(self, msg: str, *context: Any) -> None:
        self._write(Level.INFO, msg, context)

    def warn(self, msg: str, *context: Any) -> None:
        self._write(Level.WARNING, msg, context)

    def error(self, msg: str, *context: Any) -> None:
        self._write(Level.ERROR, msg, context)

    def crit(self, msg: str, *context: Any) -> None:
        self._write(Level.CRITICAL, msg, context)


_root = Logger()


def root() -> Logger:
    """Return the process-wide root logger (discards until configured)."""
    return _root


def trace(msg: str, *context: Any) -> None:
    _root._write(Level.TRACE, msg, context)


def debug(msg: str, *context: Any) -> None:
    _root._write(Level.DEBUG, msg, context)


def info(msg: str, *context: Any) -> None:
    _root._write(Level.INFO, msg, context)


def warn(msg: str, *context: Any) -> None:
    _root._write(Level.WARNING, msg, context)


def error(msg: str, *context: Any) -> None:
    _root._write(Level.ERROR, msg, context)


def crit(msg: str, *context: Any) -> None:
    _root._write(Level.CRITICAL, msg, context)
