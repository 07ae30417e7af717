"""Record-capturing sinks implementing the Handler port."""

from logpipe.adapters.storage.in_memory import InMemoryHandler
from logpipe.adapters.storage.ring_buffer import RingBufferHandler

__all__ = [
    "InMemoryHandler",
    "RingBufferHandler",
]
