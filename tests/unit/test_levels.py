"""Tests for severity levels."""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from logpipe.core.errors import InvalidLevelError
from logpipe.core.levels import Level, parse_level

KNOWN_NAMES = {
    "crit",
    "critical",
    "eror",
    "err",
    "error",
    "warn",
    "warning",
    "info",
    "dbug",
    "debug",
    "trce",
    "trace",
}


@pytest.mark.core
class TestLevelOrdering:
    """Tests for the severity order."""

    def test_critical_is_most_severe(self) -> None:
        """Critical has the lowest code, trace the highest."""
        assert min(Level) is Level.CRITICAL
        assert max(Level) is Level.TRACE

    def test_order_follows_severity(self) -> None:
        """Codes increase as severity decreases."""
        assert (
            Level.CRITICAL
            < Level.ERROR
            < Level.WARNING
            < Level.INFO
            < Level.DEBUG
            < Level.TRACE
        )

    def test_at_least(self) -> None:
        """at_least compares against a threshold."""
        assert Level.ERROR.at_least(Level.WARNING)
        assert Level.WARNING.at_least(Level.WARNING)
        assert not Level.DEBUG.at_least(Level.INFO)


@pytest.mark.core
class TestLevelRendering:
    """Tests for level names."""

    @pytest.mark.parametrize(
        ("level", "name"),
        [
            (Level.CRITICAL, "crit"),
            (Level.ERROR, "eror"),
            (Level.WARNING, "warn"),
            (Level.INFO, "info"),
            (Level.DEBUG, "dbug"),
            (Level.TRACE, "trce"),
        ],
    )
    def test_str_renders_canonical_name(self, level: Level, name: str) -> None:
        """str() gives the lowercase canonical name."""
        assert str(level) == name
        assert level.upper() == name.upper()

    def test_names_share_one_width(self) -> None:
        """All canonical names have the same width, keeping columns aligned."""
        assert {len(level.upper()) for level in Level} == {4}


@pytest.mark.core
class TestParseLevel:
    """Tests for parse_level()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("info", Level.INFO),
            ("INFO", Level.INFO),
            ("Warning", Level.WARNING),
            ("err", Level.ERROR),
            ("CRITICAL", Level.CRITICAL),
            (" debug ", Level.DEBUG),
            ("trce", Level.TRACE),
            ("0", Level.CRITICAL),
            ("5", Level.TRACE),
        ],
    )
    def test_parse_accepts_names_and_codes(self, text: str, expected: Level) -> None:
        """Names match case-insensitively; digits map to codes."""
        assert parse_level(text) is expected

    @pytest.mark.parametrize("text", ["", "verbose", "6", "-1", "inf0"])
    def test_parse_rejects_unknown_text(self, text: str) -> None:
        """Unknown text raises InvalidLevelError."""
        with pytest.raises(InvalidLevelError, match="invalid log level"):
            parse_level(text)

    def test_invalid_level_is_value_error(self) -> None:
        """InvalidLevelError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Level.parse("loud")

    @given(st.sampled_from(Level))
    def test_round_trip(self, level: Level) -> None:
        """Parsing a rendered level yields the same level."""
        assert parse_level(str(level)) is level
        assert parse_level(level.upper()) is level

    @given(st.text())
    def test_arbitrary_text_parses_or_raises(self, text: str) -> None:
        """Text outside the known names never parses."""
        key = text.strip().lower()
        assume(key not in KNOWN_NAMES)
        assume(not (key.isascii() and key.isdigit() and int(key) <= 5))
        with pytest.raises(InvalidLevelError):
            parse_level(text)
