"""Builds the default pipeline for an application.

The canonical pipeline, outermost first::

    LvlFilterHandler -> CallerFileHandler -> [MultiHandler with reporter]
        -> SyncHandler -> StreamHandler(stderr, TerminalFormat)
"""

import re
import sys
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TextIO

from logpipe.core.caller import CallerFileHandler
from logpipe.core.encoding.terminal import TerminalFormat
from logpipe.core.errors import ConfigError
from logpipe.core.handlers import (
    LvlFilterHandler,
    MultiHandler,
    StreamHandler,
    SyncHandler,
)
from logpipe.core.levels import Level, parse_level
from logpipe.core.logger import Logger, root
from logpipe.core.ports import ErrorReporter, Handler
from logpipe.core.registry import get_logger

# Named strftime patterns for the terminal timestamp
TIME_FORMATS = {
    "off": "",
    "date": " %m-%d ",
    "date-year": " %Y-%m-%d ",
    "sec": " %m-%d %H:%M:%S ",
    "sec-year": " %Y-%m-%d %H:%M:%S ",
    "musec": " %m-%d %H:%M:%S.%f ",
    "musec-year": " %Y-%m-%d %H:%M:%S.%f ",
}

APP_NAME_RE = re.compile(r"[A-Za-z0-9\-_.]{2,200}")

REPORTER_LOGGER = "reporter"


@dataclass
class Config:
    """Logger configuration.

    Attributes:
        color: Colorize terminal output.
        time_fmt: One of the ``TIME_FORMATS`` names.
        level: Threshold level name.
    """

    color: bool = False
    time_fmt: str = "sec"
    level: str = "info"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build a Config from a parsed YAML/TOML/JSON mapping.

        Accepts ``timeFmt`` as well as ``time_fmt``.
        """
        defaults = cls()
        time_fmt = data.get("timeFmt", data.get("time_fmt", defaults.time_fmt))
        return cls(
            color=bool(data.get("color", defaults.color)),
            time_fmt=str(time_fmt),
            level=str(data.get("level", defaults.level)),
        )

    def check(self) -> Level:
        """Validate the configuration and return the threshold level.

        Raises:
            ConfigError: if ``time_fmt`` is unknown.
            InvalidLevelError: if ``level`` names no level.
        """
        if self.time_fmt not in TIME_FORMATS:
            raise ConfigError(
                f"wrong time_fmt value {self.time_fmt!r}, "
                f"should be one of: {', '.join(TIME_FORMATS)}"
            )
        return parse_level(self.level)


def check_app_name(name: str, what: str = "application") -> None:
    """Validate an application or environment name.

    Raises:
        ConfigError: if ``name`` does not match ``APP_NAME_RE``.
    """
    if not APP_NAME_RE.fullmatch(name):
        raise ConfigError(
            f"wrong {what} name {name!r}, should match the regexp: "
            f"{APP_NAME_RE.pattern}"
        )


def log_internal_errors(logger: Logger, errors: Iterable[BaseException]) -> None:
    """Log every failure reported by an error reporter.

    Runs until ``errors`` is exhausted; meant for a background thread.
    """
    for err in errors:
        logger.error("Error reporter post error", err)


def new_logger(
    name: str,
    config: Config,
    reporter: ErrorReporter | None = None,
    stream: TextIO | None = None,
) -> Logger:
    """Configure the root logger with the canonical pipeline.

    Args:
        name: Application name shown in terminal output.
        config: Output settings, validated first.
        reporter: Optional out-of-band error reporter; receives every record
            that passes the level filter. Its failures are drained on a
            daemon thread and logged to the stream.
        stream: Output stream, stderr by default.

    Returns:
        The root logger.
    """
    level = config.check()
    fmt = TerminalFormat(
        with_color=config.color, time_fmt=TIME_FORMATS[config.time_fmt], name=name
    )
    if stream is None:
        stream = sys.stderr
    stream_handler: Handler = SyncHandler(StreamHandler(stream, fmt))
    handler: Handler = stream_handler
    if reporter is not None:
        handler = MultiHandler(stream_handler, reporter)
        reporter_logger = get_logger(REPORTER_LOGGER)
        reporter_logger.set_handler(stream_handler)
        threading.Thread(
            target=log_internal_errors,
            args=(reporter_logger, reporter.post_errors()),
            name="logpipe-reporter-errors",
            daemon=True,
        ).start()
    handler = CallerFileHandler(handler, short=True)
    handler = LvlFilterHandler(level, handler)

    log = root()
    log.set_handler(handler)
    if reporter is None:
        log.info("Error reporter not set. Disabling out-of-band error reporting.")
    return log


def must_logger(
    env_name: str,
    app_name: str,
    version: str,
    time_fmt: str = "sec",
    level: str = "info",
    color: bool = False,
    reporter: ErrorReporter | None = None,
    stream: TextIO | None = None,
) -> Logger:
    """Validate names and set up the root logger for ``env_name:app_name``.

    Raises:
        ConfigError: if a name or the configuration is invalid.
    """
    check_app_name(env_name, "environment")
    check_app_name(app_name, "application")
    log = new_logger(
        f"{env_name}:{app_name}",
        Config(color=color, time_fmt=time_fmt, level=level),
        reporter=reporter,
        stream=stream,
    )
    if env_name.startswith("prod") and reporter is None:
        log.error("Error reporter must be set in production environment")
    log.debug("Logger initialized", "app_version", version)
    return log
