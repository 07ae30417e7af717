"""Attribute value formatting shared by all encoders."""

from datetime import datetime
from enum import Enum
from typing import Any

from rich.pretty import pretty_repr

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

_GO_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}

_LOGFMT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote_string(s: str) -> str:
    """Double-quote ``s`` with backslash escapes for non-printable text."""
    out = ['"']
    for ch in s:
        escaped = _GO_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ch.isprintable():
            out.append(ch)
        elif ord(ch) < 0x80:
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    out.append('"')
    return "".join(out)


def escape_string(s: str) -> str:
    """Escape ``s`` for logfmt, quoting only when required.

    Quotes are added when ``s`` contains a space, ``=``, ``"`` or any
    character at or below the space. Backslash, quote, newline, carriage
    return and tab are backslash-escaped; escapes are kept even when no
    quotes are needed.
    """
    needs_quotes = False
    needs_escape = False
    for ch in s:
        if ch <= " " or ch == "=" or ch == '"':
            needs_quotes = True
        if ch in _LOGFMT_ESCAPES:
            needs_escape = True
    if not needs_escape and not needs_quotes:
        return s
    body = "".join(_LOGFMT_ESCAPES.get(ch, ch) for ch in s)
    if needs_quotes:
        return f'"{body}"'
    return body


def error_text(err: BaseException) -> str:
    """Return the message of an exception, or its type name when empty."""
    text = safe_str(err)
    return text if text else type(err).__name__


def safe_str(value: Any) -> str:
    """``str(value)`` that degrades instead of raising."""
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def format_logfmt_value(value: Any) -> str:
    """Convert an attribute value to its logfmt text."""
    if value is None:
        return "nil"
    if isinstance(value, datetime):
        return value.strftime(TIME_FORMAT)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return escape_string(safe_str(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, BaseException):
        return escape_string(error_text(value))
    return escape_string(safe_str(value))


def format_json_value(value: Any) -> Any:
    """Convert an attribute value to a JSON-safe scalar."""
    if isinstance(value, Enum):
        return safe_str(value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, datetime):
        return value.strftime(TIME_FORMAT)
    if isinstance(value, BaseException):
        return error_text(value)
    return safe_str(value)


def dump_value(obj: Any) -> str:
    """Render a full structural dump of ``obj``, ending with a newline."""
    kind = type(obj)
    return f"({kind.__module__}.{kind.__qualname__}) {pretty_repr(obj)}\n"
