"""Logfmt encoder for log records.

Attributes are written as space separated ``key=value`` pairs. Exceptions,
``Spew`` and ``Alone`` wrappers need no key: they are collected during the
walk and rendered in sections after the pairs, in that order:

    key=2 other="x"
      * title: 12
    -------- title --------
    (builtins.list) ['one', 'two']
    -------- ERROR --------
    boom
"""

import traceback
from collections.abc import Callable, Sequence
from typing import Any

from logpipe.core.encoding.values import (
    dump_value,
    error_text,
    escape_string,
    format_logfmt_value,
    safe_str,
)
from logpipe.core.models import Alone, CallerTag, Record, Spew
from logpipe.core.ports import FancyError

MALFORMED_KEY = "MALFORMED_LOGFMT_KEY"
MALFORMED_VALUE = "MALFORMED_LOGFMT: no value for last key"

ERR_HEADER = "-------- ERROR --------\n"
ERR_INF_HEADER = "-------- ERROR (infrastructure) --------\n"

# ANSI select graphic rendition codes
BOLD = 1
RED = 31
YELLOW = 33
MAGENTA = 35


def ansi(code: int, text: str) -> str:
    """Wrap ``text`` in an ANSI escape sequence."""
    return f"\x1b[{code}m{text}\x1b[0m"


def _format_stack(stack: Any) -> str:
    if isinstance(stack, list):
        return "".join(traceback.format_list(stack)).rstrip("\n")
    return safe_str(stack)


def write_logfmt(
    buf: list[str],
    attributes: Sequence[Any],
    color: int = 0,
    caller_key: str | None = None,
) -> None:
    """Append the logfmt rendering of ``attributes`` to ``buf``.

    Args:
        buf: Output fragments.
        attributes: Interleaved keys and values plus implicit values.
        color: ANSI code applied to keys, 0 for none.
        caller_key: Key for caller tags; None leaves them out.
    """
    errors: list[BaseException] = []
    spews: list[Spew] = []
    alones: list[Alone] = []

    def pair(key: str, value: str) -> None:
        buf.append(ansi(color, key) if color else key)
        buf.append("=")
        buf.append(value)

    count = len(attributes)
    i = 0
    while i < count:
        if i != 0:
            buf.append(" ")
        item = attributes[i]
        i += 1
        if isinstance(item, BaseException):
            errors.append(item)
            continue
        if isinstance(item, Spew):
            spews.append(item)
            continue
        if isinstance(item, Alone):
            alones.append(item)
            continue
        if isinstance(item, CallerTag):
            if caller_key is not None:
                pair(caller_key, escape_string(item))
            continue
        if item is None:
            continue
        key = escape_string(item) if isinstance(item, str) else MALFORMED_KEY
        if i >= count:
            pair(key, MALFORMED_VALUE)
        else:
            pair(key, format_logfmt_value(attributes[i]))
        i += 1

    for a in alones:
        buf.append(f"\n  * {a.title}: {format_logfmt_value(a.obj)}")
    for s in spews:
        buf.append(f"\n-------- {s.title or 'spew'} --------\n")
        buf.append(dump_value(s.obj))
    # a dump already ends with its own newline
    if not spews:
        buf.append("\n")
    for err in errors:
        if isinstance(err, FancyError) and not err.is_request():
            buf.append(ERR_INF_HEADER)
            buf.append(error_text(err))
            buf.append("\nstacktrace:\n")
            buf.append(_format_stack(err.stacktrace()))
        else:
            buf.append(ERR_HEADER)
            buf.append(error_text(err))
        buf.append("\n")


def logfmt(
    attributes: Sequence[Any], color: int = 0, caller_key: str | None = None
) -> str:
    """Render ``attributes`` as logfmt text ending with a newline."""
    buf: list[str] = []
    write_logfmt(buf, attributes, color, caller_key)
    return "".join(buf)


class LogfmtFormat:
    """Machine-oriented logfmt encoding.

    The built-in time, level and message fields come first under the
    record's key names, followed by the attributes. Caller tags are written
    as ``caller=...``.
    """

    def __init__(self, caller_key: str = "caller") -> None:
        self._caller_key = caller_key

    def format(self, record: Record) -> bytes:
        names = record.key_names
        common = [
            names.time,
            record.time,
            names.level,
            record.level,
            names.message,
            record.message,
        ]
        text = logfmt(common + list(record.attributes), caller_key=self._caller_key)
        return text.encode("utf-8", "backslashreplace")


class FormatFunc:
    """Adapts a plain ``Record -> bytes`` callable to the Format port."""

    def __init__(self, func: Callable[[Record], bytes]) -> None:
        self._func = func

    def format(self, record: Record) -> bytes:
        return self._func(record)
