"""Tests for the error types and port conformance."""

import pytest

from logpipe.core.encoding import JsonFormat, LogfmtFormat, TerminalFormat
from logpipe.core.errors import (
    ConfigError,
    InfrastructureError,
    InvalidLevelError,
    MultiHandlerError,
    RequestError,
)
from logpipe.core.ports import FancyError, Format


def _raise_request_error() -> RequestError:
    return RequestError("no such order")


@pytest.mark.core
class TestErrors:
    """Tests for the exception hierarchy."""

    def test_invalid_level_keeps_text(self) -> None:
        err = InvalidLevelError("loud")
        assert err.text == "loud"
        assert str(err) == "invalid log level: 'loud'"
        assert isinstance(err, ValueError)

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)

    def test_multi_handler_error_is_exception_group(self) -> None:
        err = MultiHandlerError("1 of 1 handlers failed", [OSError("x")])
        assert isinstance(err, ExceptionGroup)

    def test_request_error_captures_creation_stack(self) -> None:
        err = _raise_request_error()
        assert err.is_request()
        stack = err.stacktrace()
        assert stack[-1].name == "_raise_request_error"

    def test_infrastructure_error_wraps_cause(self) -> None:
        cause = ConnectionRefusedError("refused")
        err = InfrastructureError("cannot reach database", cause)
        assert not err.is_request()
        assert str(err) == "cannot reach database: refused"
        assert err.__cause__ is cause
        site = err.stacktrace()[-1]
        assert site.name.endswith("test_infrastructure_error_wraps_cause")

    def test_infrastructure_error_without_cause(self) -> None:
        assert str(InfrastructureError("disk full")) == "disk full"

    @pytest.mark.parametrize(
        "err", [RequestError("a"), InfrastructureError("b")]
    )
    def test_fancy_errors_satisfy_port(self, err: Exception) -> None:
        assert isinstance(err, FancyError)

    def test_plain_exception_is_not_fancy(self) -> None:
        assert not isinstance(ValueError("x"), FancyError)


@pytest.mark.core
class TestFormatsSatisfyPort:
    """The bundled encoders implement the Format port."""

    @pytest.mark.parametrize(
        "fmt", [LogfmtFormat(), JsonFormat(), TerminalFormat()]
    )
    def test_is_format(self, fmt: object) -> None:
        assert isinstance(fmt, Format)
