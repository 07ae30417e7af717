"""File-like adapter that turns stream writes into log calls."""

from collections.abc import Callable
from typing import Any


class LogWriter:
    """Writable stream whose every ``write`` becomes one log message.

    Lets code that only knows how to print to a stream log instead::

        writer = LogWriter(logger.debug)
        print("cache warmed", file=writer)
    """

    def __init__(self, log: Callable[..., Any]) -> None:
        self._log = log

    def write(self, data: str | bytes) -> int:
        text = data.decode("utf-8", "replace") if isinstance(data, bytes) else data
        # print() sends the line terminator in a separate write
        if text and text != "\n":
            self._log(text.rstrip("\n"))
        return len(data)

    def writelines(self, lines: list[str]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        return None

    def writable(self) -> bool:
        return True
