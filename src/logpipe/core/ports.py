"""Port interfaces for the logging pipeline.

These protocols define the contracts that handlers, formats and external
collaborators implement. Pipeline code depends only on these interfaces.
"""

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from logpipe.core.models import Record


@runtime_checkable
class Handler(Protocol):
    """Port for record delivery.

    Implementations write, forward or drop the record. Failures are raised
    and must reach the caller of the outermost handler.
    Examples: StreamHandler, LvlFilterHandler, MultiHandler.
    """

    def log(self, record: Record) -> None:
        """Handle a single record."""
        ...


@runtime_checkable
class Format(Protocol):
    """Port for record encoding.

    Examples: LogfmtFormat, JsonFormat, TerminalFormat.
    """

    def format(self, record: Record) -> bytes:
        """Encode a record. Must not raise on malformed attributes."""
        ...


@runtime_checkable
class FancyError(Protocol):
    """Capability of exceptions that know their origin and stack."""

    def is_request(self) -> bool:
        """Return True for errors caused by a user request."""
        ...

    def stacktrace(self) -> Any:
        """Return the captured stack (a StackSummary or printable object)."""
        ...


@runtime_checkable
class ErrorReporter(Protocol):
    """Boundary of an out-of-band error-reporting service.

    The reporter receives records like any handler and exposes the failures
    of its own deliveries so they can be logged locally.
    """

    def log(self, record: Record) -> None:
        """Queue a record for reporting."""
        ...

    def post_errors(self) -> Iterable[BaseException]:
        """Yield delivery failures until the reporter shuts down."""
        ...
