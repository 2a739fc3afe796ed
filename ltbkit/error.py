"""Error values carrying a source location and severity, plus helpers for them."""

from __future__ import annotations

import enum
import inspect
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, NoReturn, Optional, TypeVar

__all__ = [
    "Severity",
    "SourceLocation",
    "Error",
    "ContextError",
    "ErrorCallback",
    "make_error",
    "make_warning",
    "make_context_error",
    "check_valid",
    "log_error",
    "invoke_if_non_null",
    "raise_error",
]

_logger = logging.getLogger(__name__)

ContextT = TypeVar("ContextT")


class Severity(enum.Enum):
    """How serious an error is."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class SourceLocation:
    """The file and line at which an error was created."""

    filename: Path
    line_number: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "filename", Path(self.filename))


def _debug_message(location: SourceLocation, message: str) -> str:
    prefix = str(location.filename)
    if location.line_number >= 0:
        prefix += f":{location.line_number}"
    return f"[{prefix}] {message}"


class Error(Exception):
    """An error message tagged with where it came from and how severe it is."""

    def __init__(
        self,
        source_location: SourceLocation,
        severity: Severity,
        error_message: str,
    ) -> None:
        self.source_location = source_location
        self.severity = severity
        self.error_message = error_message
        self.debug_error_message = _debug_message(source_location, error_message)
        super().__init__(self.debug_error_message)

    @staticmethod
    def append_message(error: Error, message: str) -> Error:
        """Return a copy of ``error`` with ``message`` appended after a space."""
        return Error(
            error.source_location,
            error.severity,
            f"{error.error_message} {message}",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.debug_error_message == other.debug_error_message

    def __hash__(self) -> int:
        return hash(self.debug_error_message)

    def __repr__(self) -> str:
        return (
            f"Error(severity={self.severity.name}, "
            f"message={self.debug_error_message!r})"
        )


ErrorCallback = Optional[Callable[[Error], Any]]


@dataclass
class ContextError(Generic[ContextT]):
    """An error with extra data describing the specific failure."""

    error: Error
    context: ContextT

    @property
    def severity(self) -> Severity:
        return self.error.severity

    @property
    def error_message(self) -> str:
        return self.error.error_message

    @property
    def debug_error_message(self) -> str:
        return self.error.debug_error_message

    @property
    def source_location(self) -> SourceLocation:
        return self.error.source_location


def _caller_location(depth: int) -> SourceLocation:
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return SourceLocation(Path("<unknown>"), -1)
        return SourceLocation(Path(frame.f_code.co_filename), frame.f_lineno)
    finally:
        del frame


def make_error(message: str, severity: Severity = Severity.ERROR) -> Error:
    """Create an error located at the caller's file and line."""
    return Error(_caller_location(1), severity, message)


def make_warning(message: str) -> Error:
    """Create a warning located at the caller's file and line."""
    return Error(_caller_location(1), Severity.WARNING, message)


def make_context_error(error: Error, context: ContextT) -> ContextError[ContextT]:
    """Bundle an error with context data."""
    return ContextError(error, context)


def check_valid(value: Any, name: str, message: Optional[str] = None) -> None:
    """Raise an :class:`Error` located at the caller if ``value`` is falsy."""
    if value:
        return
    text = f"{name} invalid" if message is None else f"{name} invalid: {message}"
    raise Error(_caller_location(1), Severity.ERROR, text)


def log_error(error: Error) -> None:
    """Log the error's debug message at warning or error level by severity."""
    if error.severity is Severity.WARNING:
        _logger.warning("%s", error.debug_error_message)
    else:
        _logger.error("%s", error.debug_error_message)


def invoke_if_non_null(callback: ErrorCallback, error: Error) -> None:
    """Call ``callback`` with ``error`` unless the callback is None."""
    if callback:
        callback(error)


def raise_error(
    error: Error, exception_type: type[Exception] = RuntimeError
) -> NoReturn:
    """Raise ``exception_type`` built from the error's debug message."""
    raise exception_type(error.debug_error_message)