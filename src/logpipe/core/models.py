"""Core domain models for log records."""

import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from logpipe.core.levels import Level


@dataclass(frozen=True)
class KeyNames:
    """Keys used for the built-in fields in machine formats.

    Attributes:
        time: Key for the record timestamp.
        level: Key for the record level.
        message: Key for the record message.
    """

    time: str = "t"
    level: str = "lvl"
    message: str = "msg"


DEFAULT_KEY_NAMES = KeyNames()


@dataclass(frozen=True)
class CallInfo:
    """Call site that emitted a record.

    Attributes:
        filename: Absolute path of the source file.
        lineno: Line number of the logging call.
        function: Qualified name of the calling function.
        module: Module the calling function belongs to.
    """

    filename: str
    lineno: int
    function: str
    module: str = ""

    @classmethod
    def capture(cls, depth: int = 1) -> "CallInfo":
        """Capture the frame ``depth`` levels above the caller of this method."""
        frame = sys._getframe(depth + 1)
        return cls(
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno,
            function=frame.f_code.co_qualname,
            module=frame.f_globals.get("__name__", ""),
        )

    @property
    def qualified_function(self) -> str:
        if self.module:
            return f"{self.module}.{self.function}"
        return self.function

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


@dataclass(frozen=True)
class Record:
    """A single log event.

    Fields cannot be reassigned. Decorating handlers may append to
    ``attributes`` before delegating; nothing else mutates a record.

    Attributes:
        time: Time of emission (timezone aware).
        level: Severity.
        message: Display message.
        attributes: Interleaved key/value pairs, plus single-slot implicit
            values (exceptions, ``Spew`` and ``Alone`` wrappers, caller tags).
        call: Call site captured by the emitting logger, if any.
        key_names: Keys for the built-in fields in machine formats.
    """

    time: datetime
    level: Level
    message: str
    attributes: list[Any] = field(default_factory=list)
    call: CallInfo | None = None
    key_names: KeyNames = DEFAULT_KEY_NAMES


@dataclass(frozen=True)
class Spew:
    """Wraps an object for a verbose structural dump on its own lines."""

    obj: Any
    title: str = ""


def spew(obj: Any, title: str = "") -> Spew:
    """Wrap ``obj`` to be dumped in full, optionally under ``title``."""
    return Spew(obj, title)


@dataclass(frozen=True)
class Alone:
    """Wraps an object to be printed on a separate ``* title: value`` line."""

    title: str
    obj: Any


def alone(title: str, obj: Any) -> Alone:
    """Wrap ``obj`` to be printed on its own line under ``title``."""
    return Alone(title, obj)


class CallerTag(str):
    """``file:line`` of the call site, appended by ``CallerFileHandler``."""

    __slots__ = ()


class FuncName(str):
    """Calling function name, appended by ``CallerFuncHandler`` as ``fn``."""

    __slots__ = ()


class StackTrace(str):
    """Formatted call stack, appended by ``CallerStackHandler`` as ``stack``."""

    __slots__ = ()


def find_last(attributes: list[Any], kind: type) -> Any:
    """Return the last attribute of type ``kind`` or None.

    Tags are normally the most recently appended attributes, so the list is
    scanned from the end.
    """
    for value in reversed(attributes):
        if isinstance(value, kind):
            return value
    return None


def find_caller(attributes: list[Any]) -> CallerTag:
    """Return the caller tag of a record, or an empty tag when absent."""
    tag = find_last(attributes, CallerTag)
    return tag if tag is not None else CallerTag("")
