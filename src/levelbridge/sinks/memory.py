"""In-memory sink, handy for tests and for embedding the bridge."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from levelbridge.model import SessionStatus, SeverityTier, SinkEvent


@dataclass(frozen=True)
class EndedSession:
    status: SessionStatus
    max_wait_seconds: int
    reason: str


class MemorySink:
    """Collects events in a list; safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events: list[SinkEvent] = []
        self.ended: EndedSession | None = None

    @property
    def events(self) -> list[SinkEvent]:
        with self._lock:
            return list(self._events)

    def write(self, event: SinkEvent) -> None:
        with self._lock:
            self._events.append(event)

    def end_session(self, status: SessionStatus, max_wait_seconds: int, reason: str) -> None:
        with self._lock:
            self.ended = EndedSession(status=status, max_wait_seconds=max_wait_seconds, reason=reason)

    def by_severity(self, severity: SeverityTier) -> list[SinkEvent]:
        """Return the collected events of one tier."""
        return [event for event in self.events if event.severity is severity]
