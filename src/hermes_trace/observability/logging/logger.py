"""Observability – HermesLogger, the masking logger facade.

Builds a :class:`LogEntry` per call, masks its message, context and error
message with the :class:`DataMasker` it owns, then hands the entry to every
transport.  Delivery guarantees, batching and retries belong to the
transports, not to this class.
"""
from __future__ import annotations

import dataclasses
import traceback
import uuid
from typing import Any

from hermes_trace.application.masking import CustomMasker, DataMasker, MaskingConfig, MaskingRule
from hermes_trace.observability.logging.processors import get_logger
from hermes_trace.observability.logging.protocol import ErrorInfo, LogEntry, LogLevel
from hermes_trace.observability.logging.transports import Transport

_log = get_logger(__name__)

# Frames belonging to HermesLogger itself: _capture_stack, _log_entry, level method.
_INTERNAL_FRAMES = 3


class HermesLogger:
    """Logger facade that masks every entry before it reaches a transport.

    Parameters
    ----------
    level:
        Minimum level; lower entries are dropped before masking.
    transports:
        Initial transports.  The list is copied.
    context:
        Fields merged into every entry's context (call-site context wins).
    capture_stack_trace:
        Attach the exception traceback, or for WARN and above without an
        exception, the caller's stack.
    masking:
        Masking configuration; ``None`` uses the defaults.
    session_id:
        Identifier stamped on every entry; generated when omitted.

    Example
    -------
    ::

        log = HermesLogger(transports=[ConsoleTransport()])
        log.info("user login", {"email": "john.doe@example.com", "password": "hunter2"})
        # context -> {"email": "***", "password": "***"}
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        transports: list[Transport] | None = None,
        context: dict[str, Any] | None = None,
        capture_stack_trace: bool = True,
        masking: MaskingConfig | None = None,
        session_id: str | None = None,
    ) -> None:
        self._level = level
        self._transports: list[Transport] = list(transports or [])
        self._context: dict[str, Any] = dict(context or {})
        self._capture_stack_trace = capture_stack_trace
        self._masker = DataMasker(masking)
        self._session_id = session_id or uuid.uuid4().hex

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def transports(self) -> tuple[Transport, ...]:
        return tuple(self._transports)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def add_transport(self, transport: Transport) -> None:
        self._transports.append(transport)

    def remove_transport(self, name: str) -> None:
        self._transports = [t for t in self._transports if t.name != name]

    def set_level(self, level: LogLevel) -> None:
        self._level = level

    def set_context(self, context: dict[str, Any]) -> None:
        self._context = {**self._context, **context}

    def child(self, context: dict[str, Any]) -> HermesLogger:
        """Return a logger with extra context sharing this one's transports.

        The child gets a snapshot of the current masking configuration;
        later changes on either logger do not propagate to the other.
        """
        return HermesLogger(
            level=self._level,
            transports=self._transports,
            context={**self._context, **context},
            capture_stack_trace=self._capture_stack_trace,
            masking=self._masker.get_masking_config(),
            session_id=self._session_id,
        )

    # ------------------------------------------------------------------
    # Masking forwarders
    # ------------------------------------------------------------------

    def add_sensitive_field(self, field: str) -> None:
        self._masker.add_sensitive_field(field)

    def remove_sensitive_field(self, field: str) -> None:
        self._masker.remove_sensitive_field(field)

    def add_masking_rule(self, rule: MaskingRule) -> None:
        self._masker.add_masking_rule(rule)

    def set_custom_masker(self, masker: CustomMasker | None) -> None:
        self._masker.set_custom_masker(masker)

    def get_masking_config(self) -> MaskingConfig:
        return self._masker.get_masking_config()

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def debug(self, message: str, context: dict[str, Any] | None = None, tags: list[str] | None = None) -> None:
        self._log_entry(LogLevel.DEBUG, message, context, tags)

    def info(self, message: str, context: dict[str, Any] | None = None, tags: list[str] | None = None) -> None:
        self._log_entry(LogLevel.INFO, message, context, tags)

    def warn(self, message: str, context: dict[str, Any] | None = None, tags: list[str] | None = None) -> None:
        self._log_entry(LogLevel.WARN, message, context, tags)

    # common alias
    warning = warn

    def error(
        self,
        message: str,
        error: BaseException | None = None,
        context: dict[str, Any] | None = None,
        tags: list[str] | None = None,
    ) -> None:
        self._log_entry(LogLevel.ERROR, message, context, tags, error)

    def fatal(
        self,
        message: str,
        error: BaseException | None = None,
        context: dict[str, Any] | None = None,
        tags: list[str] | None = None,
    ) -> None:
        self._log_entry(LogLevel.FATAL, message, context, tags, error)

    def flush(self) -> None:
        for transport in self._transports:
            try:
                transport.flush()
            except Exception:  # noqa: BLE001 - one bad transport must not block the rest
                _log.exception("transport.flush_failed", transport=transport.name)

    def close(self) -> None:
        self.flush()
        for transport in self._transports:
            try:
                transport.close()
            except Exception:  # noqa: BLE001
                _log.exception("transport.close_failed", transport=transport.name)

    def _log_entry(
        self,
        level: LogLevel,
        message: str,
        context: dict[str, Any] | None,
        tags: list[str] | None,
        error: BaseException | None = None,
    ) -> None:
        if level.rank < self._level.rank:
            return

        info = ErrorInfo.from_exception(error) if error is not None else None
        stack: str | None = None
        if self._capture_stack_trace:
            if info is not None and info.stack:
                stack = info.stack
            elif level.rank >= LogLevel.WARN.rank:
                stack = self._capture_stack()

        entry = LogEntry(
            level=level,
            message=message,
            context={**self._context, **(context or {})},
            error=info,
            tags=tuple(tags or ()),
            session_id=self._session_id,
            stack=stack,
        )
        self._dispatch(self.apply_masking(entry))

    def apply_masking(self, entry: LogEntry) -> LogEntry:
        """Return *entry* with message, context, error and stack masked.

        Tracebacks repeat the exception message, so stack text is
        pattern-scanned like any other string.
        """
        if not self._masker.enabled:
            return entry
        mask = self._masker.mask_data
        changes: dict[str, Any] = {
            "message": mask(entry.message),
            "context": mask(entry.context),
            "stack": mask(entry.stack),
        }
        if entry.error is not None:
            changes["error"] = dataclasses.replace(
                entry.error, message=mask(entry.error.message), stack=mask(entry.error.stack)
            )
        return dataclasses.replace(entry, **changes)

    def _dispatch(self, entry: LogEntry) -> None:
        for transport in self._transports:
            try:
                transport.log(entry)
            except Exception:  # noqa: BLE001
                _log.exception("transport.log_failed", transport=transport.name)

    @staticmethod
    def _capture_stack() -> str:
        frames = traceback.format_stack()[:-_INTERNAL_FRAMES]
        return "".join(frames)


def create_logger(**options: Any) -> HermesLogger:
    """Shorthand for ``HermesLogger(**options)``."""
    return HermesLogger(**options)


__all__ = ["HermesLogger", "create_logger"]
