"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        └── ConfigError      (hermes_trace.config.validation)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from hermes_trace.kernel.errors.application import ApplicationError
from hermes_trace.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
