"""Configuration loading and validation for the bridge.

This package facade re-exports all public names so that callers can use
``from levelbridge.config import ...``.
"""

from __future__ import annotations

from levelbridge.config.loader import load_config
from levelbridge.config.model import BridgeSettings
from levelbridge.config.validator import _suggest_key, validate_config_file

__all__ = [
    "BridgeSettings",
    "_suggest_key",
    "load_config",
    "validate_config_file",
]
