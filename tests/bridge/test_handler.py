"""Tests for the logging handler that forwards records to a sink."""

from __future__ import annotations

import logging
import logging.config
import threading
import time
from pathlib import Path

import pytest

from levelbridge.bridge import SinkHandler, ThresholdCache, message_source, parse_line_number
from levelbridge.config import BridgeSettings
from levelbridge.constants.config import END_SESSION_REASON, SYSTEM_NAME
from levelbridge.exceptions import ConfigError
from levelbridge.model import ResolvedThresholds, SessionStatus, SeverityTier, ThresholdConfig
from levelbridge.severity import DEFAULT_SCHEME, LevelLookup, LevelScheme, default_level_lookup, mapping_lookup
from levelbridge.sinks import MemorySink


def test_records_are_classified_with_stdlib_levels(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    isolated_logger.addHandler(SinkHandler(memory_sink))

    isolated_logger.debug("d")
    isolated_logger.info("i")
    isolated_logger.warning("w")
    isolated_logger.error("e")
    isolated_logger.critical("c")

    assert [event.severity for event in memory_sink.events] == [
        SeverityTier.VERBOSE,
        SeverityTier.INFORMATION,
        SeverityTier.WARNING,
        SeverityTier.ERROR,
        SeverityTier.CRITICAL,
    ]


def test_event_carries_record_details(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    isolated_logger.addHandler(SinkHandler(memory_sink))

    isolated_logger.warning("disk %s at %d%%", "/var", 91, extra={"user": "alice"})

    event = memory_sink.events[0]
    assert event.system == SYSTEM_NAME
    assert event.category == isolated_logger.name
    assert event.message == "disk /var at 91%"
    assert event.user_name == "alice"
    assert event.source.method_name == "test_event_carries_record_details"
    assert event.source.file_name is not None and event.source.file_name.endswith("test_handler.py")
    assert event.source.line_number > 0
    assert event.exc_info is None


def test_empty_user_is_dropped(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    isolated_logger.addHandler(SinkHandler(memory_sink))

    isolated_logger.error("x", extra={"user": ""})

    assert memory_sink.events[0].user_name is None


def test_exception_payload_is_forwarded(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    isolated_logger.addHandler(SinkHandler(memory_sink))

    try:
        raise ValueError("boom")
    except ValueError:
        isolated_logger.exception("failed")

    event = memory_sink.events[0]
    assert event.severity is SeverityTier.ERROR
    assert event.exc_info is not None
    assert isinstance(event.exc_info[1], ValueError)


def test_formatter_renders_message(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    handler = SinkHandler(memory_sink)
    handler.setFormatter(logging.Formatter("%(levelname)s|%(message)s"))
    isolated_logger.addHandler(handler)

    isolated_logger.info("hello")

    assert memory_sink.events[0].message == "INFO|hello"


def test_records_below_verbose_floor_are_dropped(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    isolated_logger.addHandler(SinkHandler(memory_sink, severity={"verbose": "15"}))

    isolated_logger.debug("too quiet")
    isolated_logger.log(15, "just enough")

    assert [event.message for event in memory_sink.events] == ["just enough"]


def test_severity_properties_use_aliases(memory_sink: MemorySink) -> None:
    handler = SinkHandler(memory_sink)

    handler.severity_warning = "ERROR"
    handler.severity_information = "const"

    assert handler.severity_warn == "ERROR"
    assert handler.severity_info == "const"
    assert handler.severity_critical is None
    assert handler.thresholds.warn_min == logging.ERROR
    assert handler.thresholds.info_min == logging.ERROR


def test_settings_change_between_records(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    handler = SinkHandler(memory_sink)
    isolated_logger.addHandler(handler)

    isolated_logger.warning("before")
    handler.severity_critical = "WARNING"
    isolated_logger.warning("after")

    assert [event.severity for event in memory_sink.events] == [SeverityTier.WARNING, SeverityTier.CRITICAL]


def test_custom_scheme_and_lookup(isolated_logger: logging.Logger, memory_sink: MemorySink) -> None:
    handler = SinkHandler(memory_sink, scheme=DEFAULT_SCHEME, level_lookup=mapping_lookup({}))
    isolated_logger.addHandler(handler)

    isolated_logger.critical("stdlib critical is tiny on the wide scale")

    assert handler.thresholds.critical_min == 90000
    assert memory_sink.events[0].severity is SeverityTier.VERBOSE


def test_close_ends_session_when_configured(memory_sink: MemorySink) -> None:
    handler = SinkHandler(memory_sink, end_session_on_close=True)

    handler.close()
    handler.close()

    assert memory_sink.ended is not None
    assert memory_sink.ended.status is SessionStatus.NORMAL
    assert memory_sink.ended.max_wait_seconds == 5
    assert memory_sink.ended.reason == END_SESSION_REASON


def test_close_leaves_session_open_by_default(memory_sink: MemorySink) -> None:
    SinkHandler(memory_sink).close()

    assert memory_sink.ended is None


def test_sink_failure_goes_through_handle_error(
    isolated_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    class BrokenSink(MemorySink):
        def write(self, event: object) -> None:
            raise OSError("sink offline")

    handler = SinkHandler(BrokenSink())
    handled: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", handled.append)
    isolated_logger.addHandler(handler)

    isolated_logger.error("lost")

    assert [record.getMessage() for record in handled] == ["lost"]


def test_from_config_applies_yaml(tmp_path: Path, memory_sink: MemorySink) -> None:
    (tmp_path / "levelbridge.yaml").write_text(
        "scheme: stdlib\nend_session_on_close: true\nseverity:\n  warning: ERROR\n",
        encoding="utf-8",
    )

    handler = SinkHandler.from_config(memory_sink, tmp_path)

    assert handler.end_session_on_close is True
    assert handler.severity_warn == "ERROR"
    assert handler.thresholds.warn_min == logging.ERROR


def test_dict_config_builds_handler(isolated_logger: logging.Logger) -> None:
    sink = MemorySink()
    logging.config.dictConfig(
        {
            "version": 1,
            "incremental": False,
            "disable_existing_loggers": False,
            "handlers": {
                "bridge": {
                    "class": "levelbridge.bridge.SinkHandler",
                    "sink": sink,
                    "severity": {"fatal": "ERROR"},
                }
            },
            "loggers": {isolated_logger.name: {"handlers": ["bridge"], "propagate": False}},
        }
    )

    isolated_logger.error("escalated")

    assert sink.events[0].severity is SeverityTier.CRITICAL


def test_message_source_and_line_number_parsing() -> None:
    record = logging.LogRecord("x", logging.INFO, "/tmp/mod.py", 12, "m", None, None, func="fn")

    source = message_source(record)

    assert (source.method_name, source.class_name, source.file_name, source.line_number) == (
        "fn",
        "mod",
        "/tmp/mod.py",
        12,
    )
    assert parse_line_number("42") == 42
    assert parse_line_number("n/a") == 0
    assert parse_line_number(None) == 0


def test_configure_without_scheme_keeps_stdlib_scale(memory_sink: MemorySink) -> None:
    handler = SinkHandler(memory_sink)

    handler.configure(BridgeSettings(thresholds=ThresholdConfig.from_strings({"warn": "35"})))

    assert handler.thresholds == ResolvedThresholds(50, 40, 35, 20, 0)


def test_record_during_scheme_switch_uses_new_registry(
    monkeypatch: pytest.MonkeyPatch, memory_sink: MemorySink
) -> None:
    handler = SinkHandler(memory_sink)
    assert handler.thresholds == ResolvedThresholds(50, 40, 30, 20, 0)
    replace = ThresholdCache.replace

    def replace_then_classify(
        self: ThresholdCache,
        config: ThresholdConfig,
        scheme: LevelScheme | None = None,
        lookup: LevelLookup | None = None,
    ) -> None:
        replace(self, config, scheme, lookup)
        handler.classify(logging.WARNING)

    monkeypatch.setattr(ThresholdCache, "replace", replace_then_classify)
    handler.configure(BridgeSettings(scheme_name="default"))

    assert handler.thresholds == ResolvedThresholds.DEFAULT


def test_configure_with_scheme_keeps_explicit_lookup(memory_sink: MemorySink) -> None:
    lookup = mapping_lookup({"Critical": 95000})
    handler = SinkHandler(memory_sink, level_lookup=lookup)

    handler.configure(BridgeSettings(scheme_name="default"))

    assert handler.thresholds.critical_min == 95000
    assert handler.thresholds.error_min == 70000


def test_configure_with_default_scheme_uses_wide_registry(memory_sink: MemorySink) -> None:
    handler = SinkHandler(memory_sink)

    settings = BridgeSettings(thresholds=ThresholdConfig.from_strings({"warn": "Notice"}), scheme_name="default")
    handler.configure(settings)

    assert default_level_lookup("Notice") == 50000
    assert handler.thresholds.warn_min == 50000
    assert handler.classify(logging.CRITICAL) is SeverityTier.VERBOSE


def test_unknown_severity_key_is_a_config_error(memory_sink: MemorySink) -> None:
    with pytest.raises(ConfigError, match="severe"):
        SinkHandler(memory_sink, severity={"severe": "Error"})


class _SlowEndSink(MemorySink):
    def __init__(self) -> None:
        super().__init__()
        self.end_calls = 0

    def end_session(self, status: SessionStatus, max_wait_seconds: int, reason: str) -> None:
        self.end_calls += 1
        time.sleep(0.05)
        super().end_session(status, max_wait_seconds, reason)


def test_concurrent_close_ends_session_once() -> None:
    sink = _SlowEndSink()
    handler = SinkHandler(sink, end_session_on_close=True)
    barrier = threading.Barrier(4)

    def closer() -> None:
        barrier.wait()
        handler.close()

    threads = [threading.Thread(target=closer) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sink.end_calls == 1
