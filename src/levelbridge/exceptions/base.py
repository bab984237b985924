"""Base exception for levelbridge."""

from __future__ import annotations


class LevelBridgeError(Exception):
    """Base class for all levelbridge errors."""
