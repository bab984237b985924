"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

from levelbridge.constants.levels import SETTING_ALIASES

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # tier configured more than once through aliases

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"severity", "end_session_on_close", "scheme"})
ALLOWED_SEVERITY_KEYS: frozenset[str] = frozenset(SETTING_ALIASES)
