"""Python logging handler adapter for logpipe.

This adapter bridges Python's standard library logging module to a logpipe
Handler, so records emitted through ``logging.getLogger(...)`` travel the
same pipeline as records from ``logpipe.Logger``.
"""

import logging
from datetime import datetime
from typing import Any

from logpipe.core.levels import Level
from logpipe.core.models import CallInfo, Record
from logpipe.core.ports import Handler

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def to_level(levelno: int) -> Level:
    """Map a stdlib level number to a Level.

    Anything below DEBUG maps to TRACE.
    """
    if levelno >= logging.CRITICAL:
        return Level.CRITICAL
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARNING
    if levelno >= logging.INFO:
        return Level.INFO
    if levelno >= logging.DEBUG:
        return Level.DEBUG
    return Level.TRACE


class PipelineLogHandler(logging.Handler):
    """Logging handler that forwards log records to a logpipe Handler.

    Example:
        ```python
        from logpipe import LogfmtFormat, PipelineLogHandler, StreamHandler

        pipeline = StreamHandler(sys.stderr, LogfmtFormat())
        logging.getLogger().addHandler(PipelineLogHandler(pipeline))
        ```
    """

    def __init__(
        self,
        handler: Handler,
        include_logger_name: bool = True,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the bridge.

        Args:
            handler: Pipeline receiving the converted records.
            include_logger_name: Add the stdlib logger name as ``logger``.
            level: Minimum stdlib level handled.
        """
        super().__init__(level)
        self._handler = handler
        self._include_logger_name = include_logger_name

    def to_record(self, record: logging.LogRecord) -> Record:
        """Convert a stdlib LogRecord to a pipeline Record."""
        attributes: list[Any] = []
        if self._include_logger_name:
            attributes.extend(["logger", record.name])

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and not key.startswith("_"):
                attributes.extend([key, value])

        # The exception becomes an implicit error attribute
        if record.exc_info and record.exc_info[1] is not None:
            attributes.append(record.exc_info[1])

        return Record(
            time=datetime.fromtimestamp(record.created).astimezone(),
            level=to_level(record.levelno),
            message=record.getMessage(),
            attributes=attributes,
            call=CallInfo(
                filename=record.pathname,
                lineno=record.lineno,
                function=record.funcName or "",
                module=record.module,
            ),
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record through the pipeline.

        Args:
            record: The log record to emit.
        """
        try:
            self._handler.log(self.to_record(record))
        except Exception:
            self.handleError(record)
