"""Observability – log levels, LogEntry and the Logger protocol."""
from __future__ import annotations

import dataclasses
import traceback
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Protocol


class LogLevel(str, Enum):
    """Severity of a log entry, lowest first."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        return list(LogLevel).index(self)


@dataclasses.dataclass(frozen=True)
class ErrorInfo:
    """Serialisable view of an exception attached to a log entry."""

    type: str
    message: str
    stack: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorInfo:
        stack = "".join(traceback.format_exception(exc)) if exc.__traceback__ else None
        return cls(type=type(exc).__name__, message=str(exc), stack=stack)


@dataclasses.dataclass(frozen=True)
class LogEntry:
    """Structured log entry handed to transports."""
    level: LogLevel
    message: str
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    context: dict[str, Any] = dataclasses.field(default_factory=dict)
    error: ErrorInfo | None = None
    tags: tuple[str, ...] = ()
    session_id: str | None = None
    stack: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "message": self.message,
            "context": self.context,
            "tags": list(self.tags),
            "session_id": self.session_id,
        }
        if self.error is not None:
            payload["error"] = {"type": self.error.type, "message": self.error.message}
        if self.stack is not None:
            payload["stack"] = self.stack
        return payload


class Logger(Protocol):
    """What :class:`ConsoleTransport` writes to; structlog bound loggers satisfy it."""

    def debug(self, event: str, **kw: Any) -> None: ...
    def info(self, event: str, **kw: Any) -> None: ...
    def warning(self, event: str, **kw: Any) -> None: ...
    def error(self, event: str, **kw: Any) -> None: ...
    def critical(self, event: str, **kw: Any) -> None: ...


__all__ = ["ErrorInfo", "LogEntry", "LogLevel", "Logger"]
