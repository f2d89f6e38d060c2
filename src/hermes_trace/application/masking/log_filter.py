from __future__ import annotations

import logging
from typing import Any

from hermes_trace.application.masking.masker import DataMasker

__all__ = ["PiiLogFilter"]


class PiiLogFilter(logging.Filter):
    """Applies a DataMasker to log record msg and args before emission.

    Attach to a handler (or logger) to keep stdlib ``logging`` calls from
    third-party code under the same masking policy as :class:`HermesLogger`.
    """

    def __init__(self, masker: DataMasker | None = None, name: str = "") -> None:
        super().__init__(name)
        self._masker = masker or DataMasker()

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if isinstance(record.msg, (str, dict)):
            record.msg = self._masker.mask_data(record.msg)
        if isinstance(record.args, dict):
            record.args = self._masker.mask_data(record.args)
        elif isinstance(record.args, tuple):
            masked: list[Any] = [self._masker.mask_data(arg) for arg in record.args]
            record.args = tuple(masked)
        return True
