"""Config file validation for the bridge."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from levelbridge.constants.config import CONFIG_FILENAME, VALID_SCHEMES
from levelbridge.constants.levels import SETTING_ALIASES
from levelbridge.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_SEVERITY_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from levelbridge.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a levelbridge.yaml file and return all validation errors.

    This is the collect-all entry point used by ``levelbridge validate-config``
    and by the other commands before they load settings. It never raises; all
    problems are returned as :class:`ValidationError` instances.

    Level names are not checked against any registry here: an unknown name
    is a resolution-time diagnostic, not a file error.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "scheme" in raw:
        val = raw["scheme"]
        if not isinstance(val, str) or val not in VALID_SCHEMES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="scheme",
                    message="invalid value for `scheme`",
                    hint=f"expected one of: {', '.join(sorted(VALID_SCHEMES))}; got: {val!r}",
                )
            )

    if "end_session_on_close" in raw and not isinstance(raw["end_session_on_close"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="end_session_on_close",
                message="invalid type for `end_session_on_close`",
                hint="expected a boolean",
            )
        )

    _validate_severity_block(raw, path_str, errors)

    return errors


def _validate_severity_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``severity`` nested mapping in levelbridge.yaml."""
    if "severity" not in raw:
        return
    block = raw["severity"]
    if block is None:
        return
    if not isinstance(block, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="severity",
                message="invalid type for `severity`",
                hint="expected a mapping of tier name to level",
            )
        )
        return

    seen: dict[str, str] = {}
    for key in sorted(block.keys(), key=str):
        field = f"severity.{key}"
        normalized = str(key).strip().lower()
        if normalized not in ALLOWED_SEVERITY_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=field,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(normalized, ALLOWED_SEVERITY_KEYS),
                )
            )
            continue

        val = block[key]
        if val is not None and (isinstance(val, bool) or not isinstance(val, (str, int))):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field,
                    message=f"invalid type for `{field}`",
                    hint="expected a level name, an integer, or `const`",
                )
            )

        tier = SETTING_ALIASES[normalized]
        if tier in seen:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=field,
                    message=f"`{key}` sets the same tier as `{seen[tier]}`",
                    hint="keep only one of them",
                )
            )
        else:
            seen[tier] = str(key)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
