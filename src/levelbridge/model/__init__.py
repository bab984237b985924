"""Core data models for levelbridge."""

from .entities import (
    Diagnostic,
    MessageSource,
    ResolvedThresholds,
    Resolution,
    SessionStatus,
    SeverityTier,
    SinkEvent,
    ThresholdConfig,
)
from .settings import Named, Numeric, ThresholdSetting, Unset, UseSystemDefault, parse_setting

__all__ = [
    "Diagnostic",
    "MessageSource",
    "Named",
    "Numeric",
    "ResolvedThresholds",
    "Resolution",
    "SessionStatus",
    "SeverityTier",
    "SinkEvent",
    "ThresholdConfig",
    "ThresholdSetting",
    "Unset",
    "UseSystemDefault",
    "parse_setting",
]
