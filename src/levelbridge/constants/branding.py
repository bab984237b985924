"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "LEVELBRIDGE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ LEVELBRIDGE",
    "     // logging levels into five-tier sinks",
)
THRESHOLDS_TITLE: str = "Resolved thresholds"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} severity bridge"))
