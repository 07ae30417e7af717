"""Exception types raised by the logging pipeline."""

import traceback
from traceback import StackSummary


class InvalidLevelError(ValueError):
    """Raised when a level name cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid log level: {text!r}")
        self.text = text


class ConfigError(ValueError):
    """Raised when a pipeline configuration fails validation."""


class MultiHandlerError(ExceptionGroup):
    """Aggregate of failures collected by a fan-out handler."""


class RequestError(Exception):
    """Error caused by a user request (bad input, missing resource, ...).

    Rendered with the plain ERROR banner by the terminal format.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._stack = traceback.extract_stack()[:-1]

    def is_request(self) -> bool:
        return True

    def stacktrace(self) -> StackSummary:
        return self._stack


class InfrastructureError(RequestError):
    """Error caused by the environment rather than the request.

    The terminal format prints these with the infrastructure banner and the
    stack captured when the error was created.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self._stack = traceback.extract_stack()[:-1]
        self.__cause__ = cause

    def is_request(self) -> bool:
        return False
