"""Human-oriented terminal encoder.

Output layout::

    LEVEL NAME TIME CALLER] MESSAGE          key=value key=value ...

followed by the standalone, dump and error sections of the logfmt walker.
Meant for interactive programs and development only.
"""

from dataclasses import dataclass

from logpipe.core.encoding.logfmt import BOLD, MAGENTA, RED, YELLOW, ansi, write_logfmt
from logpipe.core.levels import Level
from logpipe.core.models import Record, find_caller

# Messages shorter than this are padded so attribute blocks line up.
# Measured in encoded bytes, so multi-byte text shifts the columns.
MSG_JUSTIFY = 46

LEVEL_COLORS = {
    Level.CRITICAL: RED,
    Level.ERROR: RED,
    Level.WARNING: YELLOW,
    Level.INFO: MAGENTA,
}


@dataclass(frozen=True)
class TerminalFormat:
    """Colored, column-justified terminal output.

    Attributes:
        with_color: Color the level by severity and bold attribute keys.
        time_fmt: ``strftime`` pattern for the timestamp, including its
            surrounding spaces. Empty leaves the time out.
        name: Application name printed after the level.
    """

    with_color: bool = False
    time_fmt: str = ""
    name: str = ""

    def _time_str(self, record: Record) -> str:
        if not self.time_fmt:
            return " "
        return record.time.strftime(self.time_fmt)

    def format(self, record: Record) -> bytes:
        color = LEVEL_COLORS.get(record.level, 0) if self.with_color else 0
        level = record.level.upper()
        caller = find_caller(record.attributes)
        head = f" {self.name}{self._time_str(record)}{caller}] "
        buf: list[str] = []
        if color:
            buf.extend((ansi(color, level), head, record.message, "  "))
        else:
            buf.extend((level, head, record.message))

        if record.attributes:
            msg_len = len(record.message.encode("utf-8", "backslashreplace"))
            buf.append(" " * max(MSG_JUSTIFY - msg_len, 1))

        write_logfmt(buf, record.attributes, BOLD if self.with_color else 0)
        return "".join(buf).encode("utf-8", "backslashreplace")
