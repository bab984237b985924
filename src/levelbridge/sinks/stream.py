"""Sink writing one human-readable line per event to a text stream."""

from __future__ import annotations

import sys
import threading
import traceback
from typing import TextIO

from levelbridge.model import SessionStatus, SinkEvent


def render_event(event: SinkEvent) -> str:
    """Render ``[Tier] category: message (file:line)`` plus any traceback."""
    line = f"[{event.severity.label}] {event.category}: {event.message}"
    if event.source.file_name:
        line = f"{line} ({event.source.file_name}:{event.source.line_number})"
    if event.user_name:
        line = f"{line} user={event.user_name}"
    if event.exc_info is not None:
        exc_type, exc_value, exc_tb = event.exc_info
        rendered = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))  # type: ignore[arg-type]
        line = f"{line}\n{rendered.rstrip()}"
    return line


class StreamSink:
    """Writes rendered events to ``stream`` (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._lock = threading.Lock()
        self._closed = False

    def write(self, event: SinkEvent) -> None:
        with self._lock:
            if self._closed:
                return
            self._stream.write(render_event(event) + "\n")

    def end_session(self, status: SessionStatus, max_wait_seconds: int, reason: str) -> None:
        with self._lock:
            if self._closed:
                return
            self._stream.write(f"-- session ended ({status.value}): {reason}\n")
            self._stream.flush()
            self._closed = True
