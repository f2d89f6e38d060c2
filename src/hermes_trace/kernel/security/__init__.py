"""Kernel security – built-in table of sensitive field names."""
from hermes_trace.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
