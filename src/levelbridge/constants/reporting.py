"""Output formatting constants."""

from __future__ import annotations

from levelbridge.constants.levels import TIER_KEYS

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")

DIAGNOSTIC_PREFIXES: dict[str, str] = {
    "warning": "warning",
    "info": "note",
    "verbose": "ok",
}

THRESHOLD_ROW_ORDER: tuple[str, ...] = TIER_KEYS
