"""Config loading and normalization for the bridge."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from levelbridge.config.model import BridgeSettings
from levelbridge.constants.config import CONFIG_FILENAME, DEFAULT_END_SESSION_ON_CLOSE, VALID_SCHEMES
from levelbridge.constants.levels import SETTING_ALIASES
from levelbridge.exceptions import ConfigError
from levelbridge.model import ThresholdConfig


def load_config(root: Path, config_path: Path | None = None) -> BridgeSettings:
    """Load bridge settings from ``levelbridge.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return BridgeSettings()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    return settings_from_mapping(raw, source=str(path))


def settings_from_mapping(raw: Any, *, source: str = "<mapping>") -> BridgeSettings:
    """Build settings from an already-parsed config mapping."""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config at {source} must be a YAML mapping")

    severity_raw = raw.get("severity", {})
    if severity_raw is None:
        severity_raw = {}
    if not isinstance(severity_raw, dict):
        raise ConfigError("severity must be a mapping")

    end_session_on_close = raw.get("end_session_on_close", DEFAULT_END_SESSION_ON_CLOSE)
    if not isinstance(end_session_on_close, bool):
        raise ConfigError("end_session_on_close must be a boolean")

    scheme_name = raw.get("scheme")
    if scheme_name is not None and (not isinstance(scheme_name, str) or scheme_name not in VALID_SCHEMES):
        raise ConfigError(f"scheme must be one of {sorted(VALID_SCHEMES)}, got {scheme_name!r}")

    return BridgeSettings(
        thresholds=_build_thresholds(severity_raw),
        end_session_on_close=end_session_on_close,
        scheme_name=scheme_name,
    )


def _build_thresholds(raw: dict[Any, Any]) -> ThresholdConfig:
    """Parse the ``severity`` block; later aliases of the same tier win."""
    config = ThresholdConfig()
    for key, value in raw.items():
        if not isinstance(key, str) or key.strip().lower() not in SETTING_ALIASES:
            raise ConfigError(f"severity.{key} is not a known severity setting")
        if value is not None and (isinstance(value, bool) or not isinstance(value, (str, int))):
            raise ConfigError(f"severity.{key} must be a string or integer")
        config = config.with_setting(key, value)
    return config
