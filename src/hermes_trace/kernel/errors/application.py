"""Application-layer errors: raised while wiring up loggers and maskers."""

from __future__ import annotations

from hermes_trace.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
