"""Logging handler that forwards records to a five-tier log sink."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from levelbridge.bridge.cache import ThresholdCache
from levelbridge.config import BridgeSettings, load_config
from levelbridge.constants.config import (
    END_SESSION_MAX_WAIT_SECONDS,
    END_SESSION_REASON,
    SYSTEM_NAME,
    USER_RECORD_ATTRIBUTE,
)
from levelbridge.model import MessageSource, ResolvedThresholds, SessionStatus, SeverityTier, SinkEvent
from levelbridge.severity import STDLIB_SCHEME, LevelLookup, LevelScheme
from levelbridge.sinks import LogSink


class _SeveritySetting:
    """Handler attribute reading and writing one tier's threshold setting."""

    def __init__(self, key: str) -> None:
        self._key = key

    def __get__(self, handler: SinkHandler | None, owner: type | None = None) -> Any:
        if handler is None:
            return self
        return str(handler._thresholds.get(self._key)) or None

    def __set__(self, handler: SinkHandler, value: str | int | None) -> None:
        handler._thresholds.set(self._key, value)


class SinkHandler(logging.Handler):
    """Forward ``logging`` records to a :class:`~levelbridge.sinks.LogSink`.

    Each record's numeric level is classified into a sink tier using
    thresholds resolved from the ``severity_*`` settings. Records below the
    Verbose threshold are dropped. Settings may be changed at any time; the
    next record re-resolves them.

    Usable from ``logging.config.dictConfig``: extra handler keys such as
    ``sink``, ``severity`` and ``end_session_on_close`` are passed through as
    keyword arguments.
    """

    severity_critical = _SeveritySetting("critical")
    severity_fatal = _SeveritySetting("fatal")
    severity_error = _SeveritySetting("error")
    severity_warn = _SeveritySetting("warn")
    severity_warning = _SeveritySetting("warning")
    severity_info = _SeveritySetting("info")
    severity_information = _SeveritySetting("information")
    severity_verbose = _SeveritySetting("verbose")
    severity_debug = _SeveritySetting("debug")

    def __init__(
        self,
        sink: LogSink,
        level: int | str = logging.NOTSET,
        *,
        severity: Mapping[str, str | int | None] | None = None,
        scheme: LevelScheme = STDLIB_SCHEME,
        level_lookup: LevelLookup | None = None,
        end_session_on_close: bool = False,
    ) -> None:
        super().__init__(level)
        self._sink = sink
        self._thresholds = ThresholdCache(scheme=scheme, lookup=level_lookup)
        self.end_session_on_close = end_session_on_close
        self._closed = False
        for key, value in (severity or {}).items():
            self._thresholds.set(key, value)

    @classmethod
    def from_config(
        cls,
        sink: LogSink,
        root: Path,
        config_path: Path | None = None,
        **kwargs: Any,
    ) -> SinkHandler:
        """Build a handler configured from ``levelbridge.yaml``."""
        handler = cls(sink, **kwargs)
        handler.configure(load_config(root, config_path))
        return handler

    @property
    def sink(self) -> LogSink:
        return self._sink

    @property
    def thresholds(self) -> ResolvedThresholds:
        """Currently resolved thresholds (resolving now if settings changed)."""
        return self._thresholds.thresholds()

    def configure(self, settings: BridgeSettings) -> None:
        """Apply loaded settings, replacing every tier at once.

        The handler keeps its current scheme unless the settings name one.
        """
        scheme = settings.scheme if settings.scheme_name is not None else None
        self._thresholds.replace(settings.thresholds, scheme)
        self.end_session_on_close = settings.end_session_on_close

    def classify(self, levelno: int) -> SeverityTier:
        return self._thresholds.classify(levelno)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            severity = self.classify(record.levelno)
            if severity is SeverityTier.SUPPRESSED:
                return
            event = SinkEvent(
                severity=severity,
                system=SYSTEM_NAME,
                category=record.name,
                message=self._render(record),
                source=message_source(record),
                user_name=_user_name(record),
                exc_info=record.exc_info,
            )
            self._sink.write(event)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """End the sink session if configured to, then close the handler.

        The sink outlives the handler otherwise: other handlers or logging
        systems may still be feeding the same session.
        """
        self.acquire()
        try:
            end_session = not self._closed and self.end_session_on_close
            self._closed = True
        finally:
            self.release()
        try:
            if end_session:
                self._sink.end_session(SessionStatus.NORMAL, END_SESSION_MAX_WAIT_SECONDS, END_SESSION_REASON)
        finally:
            super().close()

    def _render(self, record: logging.LogRecord) -> str:
        if self.formatter is not None:
            return self.format(record)
        return record.getMessage()


def message_source(record: logging.LogRecord) -> MessageSource:
    """Extract the code location of a record."""
    return MessageSource(
        method_name=record.funcName,
        class_name=record.module,
        file_name=record.pathname,
        line_number=parse_line_number(record.lineno),
    )


def parse_line_number(value: object) -> int:
    """Return ``value`` as a line number, or 0 when it is missing or unparseable."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


def _user_name(record: logging.LogRecord) -> str | None:
    user = getattr(record, USER_RECORD_ATTRIBUTE, None)
    if not user:
        return None
    return str(user)
