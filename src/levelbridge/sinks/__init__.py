"""Log sinks that receive forwarded events."""

from .base import LogSink
from .memory import MemorySink
from .stream import StreamSink

__all__ = ["LogSink", "MemorySink", "StreamSink"]
