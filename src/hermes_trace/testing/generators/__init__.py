"""Testing generators – Hypothesis strategies for log payloads."""
from hermes_trace.testing.generators.strategies import field_name_strategy, log_payload_strategy

__all__ = ["field_name_strategy", "log_payload_strategy"]
