"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "levelbridge.yaml"

SCHEME_DEFAULT: str = "default"
SCHEME_STDLIB: str = "stdlib"
VALID_SCHEMES: frozenset[str] = frozenset({SCHEME_DEFAULT, SCHEME_STDLIB})

DEFAULT_END_SESSION_ON_CLOSE: bool = False
END_SESSION_MAX_WAIT_SECONDS: int = 5
END_SESSION_REASON: str = "levelbridge handler has been closed."

SYSTEM_NAME: str = "logging"
DIAGNOSTIC_LOGGER_NAME: str = "levelbridge.diagnostics"
# LogRecord attribute carrying the acting user, set via ``extra={"user": ...}``.
USER_RECORD_ATTRIBUTE: str = "user"
