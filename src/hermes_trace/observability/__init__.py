"""Observability – masking logger facade, transports and structlog wiring."""

from hermes_trace.observability.logging import (
    ConsoleTransport,
    HermesLogger,
    JsonLoggerFactory,
    LogEntry,
    LogLevel,
    Transport,
)

__all__ = [
    "ConsoleTransport",
    "HermesLogger",
    "JsonLoggerFactory",
    "LogEntry",
    "LogLevel",
    "Transport",
]
