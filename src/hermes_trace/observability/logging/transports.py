"""Observability – log transports.

A transport is the last hop of a :class:`HermesLogger`: it receives entries
that have already been masked and is free to serialise them however it
likes.
"""
from __future__ import annotations

import abc

from hermes_trace.observability.logging.processors import get_logger
from hermes_trace.observability.logging.protocol import LogEntry, LogLevel, Logger


class Transport(abc.ABC):
    """Port: destination for masked log entries.

    Parameters
    ----------
    name:
        Identifier used by :meth:`HermesLogger.remove_transport`.
    level:
        Entries below this level are ignored by :meth:`should_log`.
    enabled:
        ``False`` silences the transport without removing it.
    """

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO, enabled: bool = True) -> None:
        self.name = name
        self.level = level
        self.enabled = enabled

    def should_log(self, level: LogLevel) -> bool:
        return self.enabled and level.rank >= self.level.rank

    @abc.abstractmethod
    def log(self, entry: LogEntry) -> None: ...

    def flush(self) -> None:
        """Push out anything held back; no-op by default."""

    def close(self) -> None:
        """Release resources; no-op by default."""


# LogLevel -> structlog method name
_METHODS: dict[LogLevel, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
}


class ConsoleTransport(Transport):
    """Writes entries through a structlog logger.

    Rendering (JSON, console colours, …) is whatever structlog is configured
    with, e.g. by :meth:`JsonLoggerFactory.configure`.
    Any object satisfying :class:`Logger` can be passed as *logger*.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        enabled: bool = True,
        logger: Logger | None = None,
    ) -> None:
        super().__init__("console", level=level, enabled=enabled)
        self._log: Logger = logger if logger is not None else get_logger("hermes_trace.console")

    def log(self, entry: LogEntry) -> None:
        if not self.should_log(entry.level):
            return
        fields = entry.to_dict()
        message = fields.pop("message")
        # structlog stamps its own level and time; keep the entry time apart
        del fields["level"]
        fields["entry_timestamp"] = fields.pop("timestamp")
        getattr(self._log, _METHODS[entry.level])(message, **fields)


__all__ = ["ConsoleTransport", "Transport"]
