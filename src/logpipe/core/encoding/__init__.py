"""Record encoders: logfmt, JSON and terminal."""

from logpipe.core.encoding.logfmt import FormatFunc, LogfmtFormat, logfmt
from logpipe.core.encoding.ndjson import JsonFormat
from logpipe.core.encoding.terminal import TerminalFormat
from logpipe.core.encoding.values import (
    escape_string,
    format_json_value,
    format_logfmt_value,
)

__all__ = [
    "FormatFunc",
    "JsonFormat",
    "LogfmtFormat",
    "TerminalFormat",
    "escape_string",
    "format_json_value",
    "format_logfmt_value",
    "logfmt",
]
