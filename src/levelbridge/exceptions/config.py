"""Configuration-related exceptions."""

from __future__ import annotations

from levelbridge.exceptions.base import LevelBridgeError


class ConfigError(LevelBridgeError, ValueError):
    """Raised when bridge configuration is invalid."""
