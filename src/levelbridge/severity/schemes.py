"""Level registries and the canonical level names each tier maps to."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from levelbridge.constants.config import SCHEME_DEFAULT, SCHEME_STDLIB
from levelbridge.constants.levels import DEFAULT_LEVEL_VALUES
from levelbridge.exceptions import ConfigError

type LevelLookup = Callable[[str], int | None]


@dataclass(frozen=True)
class LevelScheme:
    """Canonical level names and fallback values of a source framework.

    ``names`` and ``values`` are keyed by tier key (``critical`` .. ``verbose``).
    ``critical_alias`` is consulted alongside the Critical name; the lower of
    the two wins.
    """

    name: str
    names: Mapping[str, str]
    values: Mapping[str, int]
    critical_alias: str


DEFAULT_SCHEME = LevelScheme(
    name=SCHEME_DEFAULT,
    names={"critical": "Critical", "error": "Error", "warn": "Warn", "info": "Info", "verbose": "Verbose"},
    values={
        "critical": DEFAULT_LEVEL_VALUES["Critical"],
        "error": DEFAULT_LEVEL_VALUES["Error"],
        "warn": DEFAULT_LEVEL_VALUES["Warn"],
        "info": DEFAULT_LEVEL_VALUES["Info"],
        "verbose": DEFAULT_LEVEL_VALUES["Verbose"],
    },
    critical_alias="Fatal",
)

STDLIB_SCHEME = LevelScheme(
    name=SCHEME_STDLIB,
    names={"critical": "CRITICAL", "error": "ERROR", "warn": "WARNING", "info": "INFO", "verbose": "DEBUG"},
    values={
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warn": logging.WARNING,
        "info": logging.INFO,
        "verbose": logging.DEBUG,
    },
    critical_alias="FATAL",
)

SCHEMES: dict[str, LevelScheme] = {DEFAULT_SCHEME.name: DEFAULT_SCHEME, STDLIB_SCHEME.name: STDLIB_SCHEME}


def scheme_by_name(name: str) -> LevelScheme:
    """Return a bundled scheme, raising ConfigError for unknown names."""
    try:
        return SCHEMES[name]
    except KeyError:
        raise ConfigError(f"scheme must be one of {sorted(SCHEMES)}, got {name!r}") from None


def mapping_lookup(levels: Mapping[str, int]) -> LevelLookup:
    """Build a lookup over a fixed name-to-value mapping (exact names)."""

    def lookup(name: str) -> int | None:
        return levels.get(name)

    return lookup


def default_level_lookup(name: str) -> int | None:
    """Look up a name in the well-known default level table."""
    return DEFAULT_LEVEL_VALUES.get(name)


def stdlib_level_lookup(name: str) -> int | None:
    """Look up a level registered with the ``logging`` module.

    Tries the exact name first, then its upper-cased form, so ``Warn`` finds
    ``WARN``. Reads the live registry, which picks up ``logging.addLevelName``.
    """
    registered = logging.getLevelNamesMapping()
    value = registered.get(name)
    if value is None:
        value = registered.get(name.upper())
    return value


def lookup_for_scheme(scheme: LevelScheme) -> LevelLookup:
    """Return the registry lookup that pairs with a bundled scheme."""
    if scheme.name == SCHEME_STDLIB:
        return stdlib_level_lookup
    return default_level_lookup
