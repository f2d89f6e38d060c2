"""
hermes_trace – client-side logging with built-in data masking.

Import path convention::

    from hermes_trace.application.masking import DataMasker, MaskingConfig, MaskingRule
    from hermes_trace.observability.logging import HermesLogger, ConsoleTransport
    from hermes_trace.config.settings import EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
