"""Severity levels."""

from enum import IntEnum

from logpipe.core.errors import InvalidLevelError


class Level(IntEnum):
    """Log severity. Lower values are more severe.

    A record passes a threshold ``t`` when ``record.level <= t``.
    """

    CRITICAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    def __str__(self) -> str:
        return _NAMES[self]

    def upper(self) -> str:
        """Return the canonical name in upper case (e.g. ``EROR``)."""
        return _NAMES[self].upper()

    def at_least(self, threshold: "Level") -> bool:
        """Return True if this level is as severe as ``threshold`` or more."""
        return self <= threshold

    @classmethod
    def parse(cls, text: str) -> "Level":
        return parse_level(text)


_NAMES = {
    Level.CRITICAL: "crit",
    Level.ERROR: "eror",
    Level.WARNING: "warn",
    Level.INFO: "info",
    Level.DEBUG: "dbug",
    Level.TRACE: "trce",
}

_ALIASES = {
    "crit": Level.CRITICAL,
    "critical": Level.CRITICAL,
    "eror": Level.ERROR,
    "err": Level.ERROR,
    "error": Level.ERROR,
    "warn": Level.WARNING,
    "warning": Level.WARNING,
    "info": Level.INFO,
    "dbug": Level.DEBUG,
    "debug": Level.DEBUG,
    "trce": Level.TRACE,
    "trace": Level.TRACE,
}


def parse_level(text: str) -> Level:
    """Parse a level name, case-insensitively.

    Accepts the canonical four-letter names, the full names and the numeric
    codes ``0``..``5``.

    Raises:
        InvalidLevelError: if ``text`` names no level.
    """
    key = text.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    if key.isascii() and key.isdigit() and int(key) <= Level.TRACE:
        return Level(int(key))
    raise InvalidLevelError(text)
