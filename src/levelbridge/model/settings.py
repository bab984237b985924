"""Parsed form of a single severity threshold setting."""

from __future__ import annotations

from dataclasses import dataclass

from levelbridge.constants.levels import CONST_TOKEN, INTEGER_SETTING_PATTERN


@dataclass(frozen=True)
class Unset:
    """No value configured; the tier's canonical level applies."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class Numeric:
    """Raw numeric threshold, used verbatim."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UseSystemDefault:
    """The ``const`` token: use the hardcoded default for the tier."""

    def __str__(self) -> str:
        return CONST_TOKEN


@dataclass(frozen=True)
class Named:
    """Level name to look up in the source framework's registry."""

    name: str

    def __str__(self) -> str:
        return self.name


type ThresholdSetting = Unset | Numeric | UseSystemDefault | Named


def parse_setting(raw: str | int | None) -> ThresholdSetting:
    """Parse a raw configuration value into a threshold setting.

    The ``const`` token is case-sensitive; any other non-numeric text is
    treated as a level name.
    """
    if raw is None:
        return Unset()
    if isinstance(raw, bool):
        return Named(str(raw))
    if isinstance(raw, int):
        return Numeric(raw)
    if raw == "":
        return Unset()
    if INTEGER_SETTING_PATTERN.match(raw):
        return Numeric(int(raw))
    if raw == CONST_TOKEN:
        return UseSystemDefault()
    return Named(raw)
