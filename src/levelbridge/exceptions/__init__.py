"""Shared exception hierarchy for levelbridge."""

from __future__ import annotations

from .base import LevelBridgeError
from .config import ConfigError

__all__ = [
    "ConfigError",
    "LevelBridgeError",
]
