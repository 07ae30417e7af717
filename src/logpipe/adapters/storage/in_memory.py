"""In-memory record sinks."""

from collections.abc import Iterator
from datetime import datetime

from logpipe.core.levels import Level
from logpipe.core.models import Record


def _select(
    records: list[Record], since: datetime | None, level: Level | None
) -> Iterator[Record]:
    selected = [
        r
        for r in records
        if (since is None or r.time > since) and (level is None or r.level == level)
    ]
    yield from sorted(selected, key=lambda r: r.time)


class InMemoryHandler:
    """Handler that keeps every record it receives in a list.

    Suitable for testing and for inspecting what reached a point of the
    pipeline.
    """

    def __init__(self) -> None:
        self.records: list[Record] = []

    def log(self, record: Record) -> None:
        self.records.append(record)

    def read(
        self, since: datetime | None = None, level: Level | None = None
    ) -> Iterator[Record]:
        """Read records newer than ``since``, optionally of one level only.

        Records are yielded ordered by time.
        """
        return _select(self.records, since, level)

    def clear(self) -> None:
        self.records.clear()
