"""Hardcoded threshold defaults, tier names, and setting aliases."""

from __future__ import annotations

import re

SEVERITY_CRITICAL_DEFAULT: int = 90000
SEVERITY_ERROR_DEFAULT: int = 70000
SEVERITY_WARN_DEFAULT: int = 60000
SEVERITY_INFO_DEFAULT: int = 40000
# Floor for the Verbose filter; events below it are not forwarded at all.
SEVERITY_VERBOSE_DEFAULT: int = 0

CONST_TOKEN: str = "const"
INTEGER_SETTING_PATTERN: re.Pattern[str] = re.compile(r"^\s*[+-]?[0-9]+\s*$")

TIER_KEYS: tuple[str, ...] = ("critical", "error", "warn", "info", "verbose")

SETTING_ALIASES: dict[str, str] = {
    "critical": "critical",
    "fatal": "critical",
    "error": "error",
    "warn": "warn",
    "warning": "warn",
    "info": "info",
    "information": "info",
    "verbose": "verbose",
    "debug": "verbose",
}

SETTING_LABELS: dict[str, str] = {
    "critical": "SeverityCritical",
    "error": "SeverityError",
    "warn": "SeverityWarn",
    "info": "SeverityInfo",
    "verbose": "SeverityVerbose",
}

HARDCODED_DEFAULTS: dict[str, int] = {
    "critical": SEVERITY_CRITICAL_DEFAULT,
    "error": SEVERITY_ERROR_DEFAULT,
    "warn": SEVERITY_WARN_DEFAULT,
    "info": SEVERITY_INFO_DEFAULT,
    "verbose": SEVERITY_VERBOSE_DEFAULT,
}

# Named levels of the well-known framework whose defaults the constants above mirror.
DEFAULT_LEVEL_VALUES: dict[str, int] = {
    "Off": 2147483647,
    "Emergency": 120000,
    "Fatal": 110000,
    "Alert": 100000,
    "Critical": 90000,
    "Severe": 80000,
    "Error": 70000,
    "Warn": 60000,
    "Notice": 50000,
    "Info": 40000,
    "Debug": 30000,
    "Fine": 30000,
    "Trace": 20000,
    "Finer": 20000,
    "Verbose": 10000,
    "Finest": 10000,
    "All": -2147483648,
}
