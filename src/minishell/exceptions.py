"""Exception classes for the shell.

All custom exceptions inherit from ApplicationError so callers can catch the
whole family at the loop boundary.

Exception classes support two patterns:
1. No-argument raise: raise AlreadyReapedError()
2. Contextual attributes: err = CommandLineTooLongError(length=120, limit=100); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all shell errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            doc = self.__class__.__doc__ or "Application error occurred"
            message = doc.strip().splitlines()[0]
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class CommandLineTooLongError(ApplicationError):
    """Input line exceeds the configured length bound."""

    def __init__(self, message: str = "", *, length: int = 0, limit: int = 0, **kwargs: Any) -> None:
        if not message:
            message = f"line too long ({length} > {limit} characters)"
        super().__init__(message, length=length, limit=limit, **kwargs)


class ProcessStateError(ApplicationError):
    """Process handle used in a state that does not allow the operation."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Process handle used in an invalid state"
        super().__init__(message, **kwargs)


class AlreadyReapedError(ProcessStateError):
    """Process was already reaped and cannot be waited on again."""

    def __init__(self, message: str = "", *, pid: int | None = None, **kwargs: Any) -> None:
        if not message:
            message = f"Process {pid} has already been reaped"
        super().__init__(message, pid=pid, **kwargs)


__all__ = [
    "AlreadyReapedError",
    "ApplicationError",
    "CommandLineTooLongError",
    "ProcessStateError",
]
