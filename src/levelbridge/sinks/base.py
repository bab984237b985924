"""Interface implemented by every log sink."""

from __future__ import annotations

from typing import Protocol

from levelbridge.model import SessionStatus, SinkEvent


class LogSink(Protocol):
    """Central log service receiving classified events."""

    def write(self, event: SinkEvent) -> None:
        """Record one event."""
        ...

    def end_session(self, status: SessionStatus, max_wait_seconds: int, reason: str) -> None:
        """Close the recording session, flushing for at most ``max_wait_seconds``."""
        ...
