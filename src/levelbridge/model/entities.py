"""Threshold, classification and sink event models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import ClassVar, Literal

from levelbridge.constants.levels import (
    SETTING_ALIASES,
    SEVERITY_CRITICAL_DEFAULT,
    SEVERITY_ERROR_DEFAULT,
    SEVERITY_INFO_DEFAULT,
    SEVERITY_VERBOSE_DEFAULT,
    SEVERITY_WARN_DEFAULT,
)
from levelbridge.exceptions import ConfigError
from levelbridge.model.settings import ThresholdSetting, Unset, parse_setting

type DiagnosticSeverity = Literal["warning", "info", "verbose"]
type ExcInfo = tuple[type[BaseException], BaseException, object] | None


class SeverityTier(IntEnum):
    """Sink severity, ordered from least to most severe."""

    SUPPRESSED = 0
    VERBOSE = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


class SessionStatus(Enum):
    """Final state reported to the sink when a session ends."""

    RUNNING = "running"
    NORMAL = "normal"
    CRASHED = "crashed"


@dataclass(frozen=True)
class ThresholdConfig:
    """User-supplied threshold settings, one per tier."""

    critical: ThresholdSetting = field(default_factory=Unset)
    error: ThresholdSetting = field(default_factory=Unset)
    warn: ThresholdSetting = field(default_factory=Unset)
    info: ThresholdSetting = field(default_factory=Unset)
    verbose: ThresholdSetting = field(default_factory=Unset)

    @classmethod
    def from_strings(cls, values: dict[str, str | int | None]) -> ThresholdConfig:
        """Build a config from raw values keyed by tier name or alias."""
        config = cls()
        for key, raw in values.items():
            config = config.with_setting(key, raw)
        return config

    def with_setting(self, key: str, raw: str | int | None) -> ThresholdConfig:
        """Return a copy with one tier replaced; ``key`` may be any alias."""
        tier_key = SETTING_ALIASES.get(key.strip().lower())
        if tier_key is None:
            raise ConfigError(f"unknown severity setting `{key}`; expected one of {sorted(SETTING_ALIASES)}")
        return replace(self, **{tier_key: parse_setting(raw)})

    def get(self, key: str) -> ThresholdSetting:
        tier_key = SETTING_ALIASES.get(key.strip().lower())
        if tier_key is None:
            raise ConfigError(f"unknown severity setting `{key}`; expected one of {sorted(SETTING_ALIASES)}")
        return getattr(self, tier_key)


@dataclass(frozen=True)
class ResolvedThresholds:
    """Minimum level value for each sink tier."""

    critical_min: int
    error_min: int
    warn_min: int
    info_min: int
    verbose_min: int

    DEFAULT: ClassVar[ResolvedThresholds]

    def as_dict(self) -> dict[str, int]:
        return {
            "critical": self.critical_min,
            "error": self.error_min,
            "warn": self.warn_min,
            "info": self.info_min,
            "verbose": self.verbose_min,
        }


ResolvedThresholds.DEFAULT = ResolvedThresholds(
    critical_min=SEVERITY_CRITICAL_DEFAULT,
    error_min=SEVERITY_ERROR_DEFAULT,
    warn_min=SEVERITY_WARN_DEFAULT,
    info_min=SEVERITY_INFO_DEFAULT,
    verbose_min=SEVERITY_VERBOSE_DEFAULT,
)


@dataclass(frozen=True)
class Diagnostic:
    """Self-diagnostic produced while resolving thresholds."""

    severity: DiagnosticSeverity
    message: str


@dataclass(frozen=True)
class Resolution:
    """Result of resolving a threshold config."""

    thresholds: ResolvedThresholds
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class MessageSource:
    """Code location an event was logged from."""

    method_name: str | None = None
    class_name: str | None = None
    file_name: str | None = None
    line_number: int = 0


@dataclass(frozen=True)
class SinkEvent:
    """One event forwarded to a log sink."""

    severity: SeverityTier
    system: str
    category: str
    message: str
    source: MessageSource = MessageSource()
    user_name: str | None = None
    exc_info: ExcInfo = None
