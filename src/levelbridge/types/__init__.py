"""Shared type aliases for levelbridge."""

from .common import JsonObject, JsonScalar, JsonValue

__all__ = ["JsonObject", "JsonScalar", "JsonValue"]
