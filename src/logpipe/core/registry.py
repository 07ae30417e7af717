"""Named logger registry, used to share loggers among libraries.

Overwriting a registered name copies the new logger into the existing
instance, so references obtained earlier observe the change.
"""

import threading

from logpipe.core.logger import Logger


class Registry:
    """Thread-safe mapping of names to loggers."""

    def __init__(self) -> None:
        self._loggers: dict[str, Logger] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Logger:
        """Return the logger registered as ``name``, creating it if needed."""
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger()
                self._loggers[name] = logger
            return logger

    def set(self, name: str, logger: Logger) -> None:
        """Register ``logger`` as ``name``.

        Raises:
            TypeError: if ``logger`` is not a Logger.
        """
        if not isinstance(logger, Logger):
            raise TypeError(
                "unsupported logger type to overwrite already existing logger: "
                f"{type(logger).__name__}"
            )
        with self._lock:
            existing = self._loggers.get(name)
            if existing is None:
                self._loggers[name] = logger
            elif existing is not logger:
                existing.copy_from(logger)

    def reset(self) -> None:
        """Forget every registered logger."""
        with self._lock:
            self._loggers.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._loggers


_default = Registry()


def get_logger(name: str) -> Logger:
    return _default.get(name)


def set_logger(name: str, logger: Logger) -> None:
    _default.set(name, logger)


def reset() -> None:
    _default.reset()
