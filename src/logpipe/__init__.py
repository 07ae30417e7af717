"""Structured, leveled logging built from composable handlers.

Records carry a message, a level and an ordered list of key/value
attributes. Handlers filter, annotate, fan out, serialize and deliver them::

    import sys
    import logpipe

    log = logpipe.Logger("svc", "api")
    log.set_handler(
        logpipe.LvlFilterHandler(
            logpipe.Level.INFO,
            logpipe.CallerFileHandler(
                logpipe.SyncHandler(
                    logpipe.StreamHandler(sys.stderr, logpipe.TerminalFormat())
                )
            ),
        )
    )
    log.info("request served", "path", "/users", "status", 200)
"""

from logpipe.adapters.logging import PipelineLogHandler
from logpipe.adapters.storage import InMemoryHandler, RingBufferHandler
from logpipe.adapters.writer import LogWriter
from logpipe.core.caller import (
    CallerFileHandler,
    CallerFuncHandler,
    CallerStackHandler,
)
from logpipe.core.encoding import (
    FormatFunc,
    JsonFormat,
    LogfmtFormat,
    TerminalFormat,
    format_logfmt_value,
    logfmt,
)
from logpipe.core.errors import (
    ConfigError,
    InfrastructureError,
    InvalidLevelError,
    MultiHandlerError,
    RequestError,
)
from logpipe.core.handlers import (
    DiscardHandler,
    FuncHandler,
    LvlFilterHandler,
    MultiHandler,
    StreamHandler,
    SwapHandler,
    SyncHandler,
)
from logpipe.core.levels import Level, parse_level
from logpipe.core.logger import (
    Logger,
    crit,
    debug,
    error,
    info,
    root,
    trace,
    warn,
)
from logpipe.core.models import (
    Alone,
    CallerTag,
    CallInfo,
    KeyNames,
    Record,
    Spew,
    alone,
    spew,
)
from logpipe.core.ports import ErrorReporter, FancyError, Format, Handler
from logpipe.core.registry import get_logger, set_logger

__all__ = [
    "Alone",
    "CallInfo",
    "CallerFileHandler",
    "CallerFuncHandler",
    "CallerStackHandler",
    "CallerTag",
    "ConfigError",
    "DiscardHandler",
    "ErrorReporter",
    "FancyError",
    "Format",
    "FormatFunc",
    "FuncHandler",
    "Handler",
    "InMemoryHandler",
    "InfrastructureError",
    "InvalidLevelError",
    "JsonFormat",
    "KeyNames",
    "Level",
    "LogWriter",
    "LogfmtFormat",
    "Logger",
    "LvlFilterHandler",
    "MultiHandler",
    "MultiHandlerError",
    "PipelineLogHandler",
    "Record",
    "RequestError",
    "RingBufferHandler",
    "Spew",
    "StreamHandler",
    "SwapHandler",
    "SyncHandler",
    "TerminalFormat",
    "alone",
    "crit",
    "debug",
    "error",
    "format_logfmt_value",
    "get_logger",
    "info",
    "logfmt",
    "parse_level",
    "root",
    "set_logger",
    "spew",
    "trace",
    "warn",
]
