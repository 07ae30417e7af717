"""Ring buffer record sink.

Provides bounded in-memory capture that automatically evicts the oldest
records when the buffer is full. Useful for keeping the recent history of a
running service with predictable memory usage.
"""

from collections import deque
from collections.abc import Iterator
from datetime import datetime

from logpipe.adapters.storage.in_memory import _select
from logpipe.core.levels import Level
from logpipe.core.models import Record


class RingBufferHandler:
    """Handler keeping the last ``max_size`` records.

    Args:
        max_size: Maximum number of records to keep.
    """

    def __init__(self, max_size: int) -> None:
        self._buffer: deque[Record] = deque(maxlen=max_size)

    def log(self, record: Record) -> None:
        self._buffer.append(record)

    @property
    def records(self) -> list[Record]:
        return list(self._buffer)

    def read(
        self, since: datetime | None = None, level: Level | None = None
    ) -> Iterator[Record]:
        """Read buffered records newer than ``since``, ordered by time."""
        return _select(list(self._buffer), since, level)
