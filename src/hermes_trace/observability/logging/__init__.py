"""Observability – structured logging ports and helpers."""
from hermes_trace.observability.logging.protocol import ErrorInfo, LogEntry, LogLevel, Logger
from hermes_trace.observability.logging.processors import MaskingProcessor, get_logger
from hermes_trace.observability.logging.factory import JsonLoggerFactory
from hermes_trace.observability.logging.transports import ConsoleTransport, Transport
from hermes_trace.observability.logging.logger import HermesLogger, create_logger

__all__ = [
    "ConsoleTransport",
    "ErrorInfo",
    "HermesLogger",
    "JsonLoggerFactory",
    "LogEntry",
    "LogLevel",
    "Logger",
    "MaskingProcessor",
    "Transport",
    "create_logger",
    "get_logger",
]
