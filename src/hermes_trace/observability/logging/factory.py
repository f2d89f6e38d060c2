"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from hermes_trace.application.masking import DataMasker
from hermes_trace.observability.logging.processors import MaskingProcessor


class JsonLoggerFactory:
    """Configure structlog for JSON output on the root stdlib handler."""

    @staticmethod
    def configure(level: int = logging.INFO, masker: DataMasker | None = None) -> None:
        """Install the structlog pipeline.

        When *masker* is given, a :class:`MaskingProcessor` runs right after
        the contextvars merge so bound context is masked too.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if masker is not None:
            shared_processors.insert(1, MaskingProcessor(masker))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(default=str),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
