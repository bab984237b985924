"""Threshold resolution and severity classification."""

from .classifier import classify
from .resolver import resolve
from .schemes import (
    DEFAULT_SCHEME,
    STDLIB_SCHEME,
    LevelLookup,
    LevelScheme,
    default_level_lookup,
    lookup_for_scheme,
    mapping_lookup,
    scheme_by_name,
    stdlib_level_lookup,
)

__all__ = [
    "DEFAULT_SCHEME",
    "STDLIB_SCHEME",
    "LevelLookup",
    "LevelScheme",
    "classify",
    "default_level_lookup",
    "lookup_for_scheme",
    "mapping_lookup",
    "resolve",
    "scheme_by_name",
    "stdlib_level_lookup",
]
