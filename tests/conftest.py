"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from typing import Any

import pytest

from logpipe.adapters.storage.in_memory import InMemoryHandler
from logpipe.core import registry
from logpipe.core.handlers import DiscardHandler
from logpipe.core.levels import Level
from logpipe.core.logger import root
from logpipe.core.models import CallInfo, Record

FIXED_TIME = datetime(2015, 11, 20, 1, 34, 22, tzinfo=UTC)


@pytest.fixture
def fixed_time() -> datetime:
    """Timestamp used by records built in tests."""
    return FIXED_TIME


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory fixture for records with a fixed time.

    Usage:
        record = make_record("key", 2, level=Level.ERROR, message="failed")
    """

    def _make(
        *attributes: Any,
        level: Level = Level.INFO,
        message: str = "msg",
        call: CallInfo | None = None,
        time: datetime = FIXED_TIME,
        **kwargs: Any,
    ) -> Record:
        return Record(
            time=time,
            level=level,
            message=message,
            attributes=list(attributes),
            call=call,
            **kwargs,
        )

    return _make


@pytest.fixture
def call_info() -> CallInfo:
    """Call site located in a nested package directory."""
    return CallInfo(
        filename="/srv/app/shop/orders.py",
        lineno=42,
        function="OrderService.place",
        module="shop.orders",
    )


@pytest.fixture
def recorder() -> InMemoryHandler:
    """Handler that records every record it receives."""
    return InMemoryHandler()


@pytest.fixture
def clean_root() -> Iterator[None]:
    """Restore the root logger and the default registry after a test."""
    yield
    root().set_handler(DiscardHandler())
    registry.reset()
