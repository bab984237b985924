"""Render resolutions and classifications for the terminal or as JSON."""

from __future__ import annotations

from levelbridge.constants.branding import THRESHOLDS_TITLE
from levelbridge.constants.levels import SETTING_LABELS
from levelbridge.constants.reporting import DIAGNOSTIC_PREFIXES, THRESHOLD_ROW_ORDER
from levelbridge.model import Resolution, ThresholdConfig
from levelbridge.types import JsonObject


def resolution_to_dict(resolution: Resolution, config: ThresholdConfig, scheme_name: str) -> JsonObject:
    """Serialize a resolution with the settings it came from."""
    return {
        "scheme": scheme_name,
        "settings": {key: (str(config.get(key)) or None) for key in THRESHOLD_ROW_ORDER},
        "thresholds": dict(resolution.thresholds.as_dict()),
        "diagnostics": [
            {"severity": diagnostic.severity, "message": diagnostic.message} for diagnostic in resolution.diagnostics
        ],
    }


def render_resolution(
    resolution: Resolution,
    config: ThresholdConfig,
    scheme_name: str,
    *,
    verbose: bool = False,
) -> str:
    """Render a threshold table followed by the diagnostics."""
    values = resolution.thresholds.as_dict()
    lines = [f"{THRESHOLDS_TITLE} (scheme: {scheme_name})", ""]
    width = max(len(label) for label in SETTING_LABELS.values())
    for key in THRESHOLD_ROW_ORDER:
        setting = str(config.get(key)) or "-"
        lines.append(f"  {SETTING_LABELS[key]:<{width}}  {values[key]:>11}  (setting: {setting})")

    shown = [d for d in resolution.diagnostics if verbose or d.severity != "verbose"]
    if shown:
        lines.append("")
        for diagnostic in shown:
            lines.append(f"{DIAGNOSTIC_PREFIXES[diagnostic.severity]}: {diagnostic.message}")
    return "\n".join(lines)


def classification_to_dict(rows: list[tuple[str, int, str]]) -> JsonObject:
    """Serialize ``(input, level value, tier label)`` rows."""
    return {"results": [{"input": text, "level": value, "tier": tier} for text, value, tier in rows]}


def render_classification(rows: list[tuple[str, int, str]]) -> str:
    """Render one ``input (value) -> Tier`` line per row."""
    return "\n".join(f"{text} ({value}) -> {tier}" for text, value, tier in rows)
