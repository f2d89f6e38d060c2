"""Observability – structlog processors and get_logger helper.

MaskingProcessor: runs every event dict through a :class:`DataMasker`.
get_logger(name): returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog

from hermes_trace.application.masking import DataMasker


class MaskingProcessor:
    """structlog processor that masks the whole event dict.

    The ``event`` string is pattern-scanned like any other string value, and
    keyword arguments named like sensitive fields are masked by key.

    Usage::

        import structlog
        from hermes_trace.observability.logging.processors import MaskingProcessor

        structlog.configure(processors=[MaskingProcessor(DataMasker()), ...])
    """

    def __init__(self, masker: DataMasker | None = None) -> None:
        self._masker = masker or DataMasker()

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._masker.mask_data(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MaskingProcessor", "get_logger"]
