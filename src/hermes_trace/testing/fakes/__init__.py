"""Testing fakes – in-memory stand-ins for I/O ports."""
from hermes_trace.testing.fakes.transport import InMemoryTransport

__all__ = ["InMemoryTransport"]
