"""Resolve threshold settings into five consistent numeric thresholds.

Tiers are processed from most to least severe. Each tier's raw value comes
from its setting (unset, number, ``const`` or level name); any inconsistency
with the tier above is repaired by lowering the less severe tier. Resolution
never raises: bad input is replaced by a default and reported as a
:class:`~levelbridge.model.Diagnostic`.

The Verbose tier doubles as the forwarding floor. Events below it are
dropped, so a misconfigured Verbose value is reset to the floor constant
instead of being clamped up against Info.
"""

from __future__ import annotations

from levelbridge.constants.levels import HARDCODED_DEFAULTS, SETTING_LABELS, SEVERITY_VERBOSE_DEFAULT
from levelbridge.model import (
    Diagnostic,
    Named,
    Numeric,
    ResolvedThresholds,
    Resolution,
    ThresholdConfig,
    ThresholdSetting,
    Unset,
    UseSystemDefault,
)
from levelbridge.severity.schemes import DEFAULT_SCHEME, LevelLookup, LevelScheme


def resolve(
    config: ThresholdConfig,
    lookup: LevelLookup,
    scheme: LevelScheme = DEFAULT_SCHEME,
) -> Resolution:
    """Compute thresholds for ``config`` against a level registry."""
    diagnostics: list[Diagnostic] = []
    registry = _Registry(lookup, diagnostics)

    critical = _tier_value("critical", config.critical, registry, scheme, diagnostics)
    diagnostics.append(_confirmed("critical", critical))

    error = _tier_value("error", config.error, registry, scheme, diagnostics)
    error = _repair("error", error, "critical", critical, diagnostics)

    warn = _tier_value("warn", config.warn, registry, scheme, diagnostics)
    warn = _repair("warn", warn, "error", error, diagnostics)

    info = _tier_value("info", config.info, registry, scheme, diagnostics)
    info = _repair("info", info, "warn", warn, diagnostics)

    verbose = _tier_value("verbose", config.verbose, registry, scheme, diagnostics)
    verbose = _repair_verbose(verbose, info, diagnostics)

    thresholds = ResolvedThresholds(
        critical_min=critical,
        error_min=error,
        warn_min=warn,
        info_min=info,
        verbose_min=verbose,
    )
    return Resolution(thresholds=thresholds, diagnostics=tuple(diagnostics))


class _Registry:
    """Wraps the external lookup so a failing registry reads as "not found"."""

    def __init__(self, lookup: LevelLookup, diagnostics: list[Diagnostic]) -> None:
        self._lookup = lookup
        self._diagnostics = diagnostics

    def get(self, name: str) -> int | None:
        try:
            value = self._lookup(name)
        except Exception as exc:
            self._diagnostics.append(Diagnostic("warning", f"Level lookup for {name!r} failed: {exc}"))
            return None
        if value is None or isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    def canonical(self, key: str, scheme: LevelScheme) -> tuple[int | None, str]:
        """Look up the tier's canonical name; Critical also tries its alias and keeps the lower."""
        name = scheme.names[key]
        value = self.get(name)
        if key != "critical":
            return value, name

        alias = scheme.critical_alias
        alias_value = self.get(alias)
        if value is not None and alias_value is not None:
            return min(value, alias_value), f"minimum of {name} or {alias}"
        if value is None and alias_value is not None:
            return alias_value, alias
        return value, name


def _tier_value(
    key: str,
    setting: ThresholdSetting,
    registry: _Registry,
    scheme: LevelScheme,
    diagnostics: list[Diagnostic],
) -> int:
    match setting:
        case Unset():
            value, _ = registry.canonical(key, scheme)
            if value is None:
                value = scheme.values[key]
            return _floor_verbose(value) if key == "verbose" else value
        case Numeric(value=value):
            return value
        case UseSystemDefault():
            return HARDCODED_DEFAULTS[key]
        case Named(name=name):
            return _named_value(key, name, registry, scheme, diagnostics)
    raise AssertionError(f"unhandled setting {setting!r}")


def _named_value(
    key: str,
    name: str,
    registry: _Registry,
    scheme: LevelScheme,
    diagnostics: list[Diagnostic],
) -> int:
    label = SETTING_LABELS[key]
    value = registry.get(name)
    if value is not None:
        return value

    canonical_name = scheme.names[key]
    value, tried = registry.canonical(key, scheme)
    if name != canonical_name:
        using = f"trying {tried} instead"
        if key == "verbose" and value is not None and value > SEVERITY_VERBOSE_DEFAULT:
            value = SEVERITY_VERBOSE_DEFAULT
            using = f"overriding {canonical_name} down to {SEVERITY_VERBOSE_DEFAULT}"
        diagnostics.append(
            Diagnostic(
                "warning",
                f'Invalid configuration option value "{name}" for {label}: '
                f"Named level not found in level map ({using})",
            )
        )
    if value is not None:
        return value

    fallback = scheme.values[key]
    if key == "verbose":
        fallback = _floor_verbose(fallback)
    searched = f"{canonical_name} or {scheme.critical_alias}" if key == "critical" else canonical_name
    diagnostics.append(
        Diagnostic(
            "info",
            f'Could not resolve bad configuration value "{name}" for {label}: '
            f"No level named {searched} found in level map (defaulting to {fallback})",
        )
    )
    return fallback


def _floor_verbose(value: int) -> int:
    """Lower a positive Verbose value to the floor; negative floors are kept."""
    if value > SEVERITY_VERBOSE_DEFAULT:
        return SEVERITY_VERBOSE_DEFAULT
    return value


def _repair(key: str, value: int, upper_key: str, upper: int, diagnostics: list[Diagnostic]) -> int:
    if value > upper:
        diagnostics.append(_improper(key, value, upper_key, upper))
        value = upper
    if value == upper:
        diagnostics.append(_unreachable(key, upper_key))
    diagnostics.append(_confirmed(key, value))
    return value


def _repair_verbose(value: int, info: int, diagnostics: list[Diagnostic]) -> int:
    if value > info:
        diagnostics.append(_improper("verbose", value, "info", info))
        value = SEVERITY_VERBOSE_DEFAULT if info > SEVERITY_VERBOSE_DEFAULT else info
        diagnostics.append(Diagnostic("info", f"Minimum threshold for forwarding events overridden to {value}"))
    if value == info:
        diagnostics.append(_unreachable("verbose", "info"))
    diagnostics.append(_confirmed("verbose", value))
    return value


def _improper(key: str, value: int, upper_key: str, upper: int) -> Diagnostic:
    return Diagnostic(
        "warning",
        f"Improper severity threshold configuration: "
        f"{SETTING_LABELS[key]}={value} can't exceed {SETTING_LABELS[upper_key]}={upper}",
    )


def _unreachable(key: str, upper_key: str) -> Diagnostic:
    return Diagnostic(
        "info",
        f"Unusual severity threshold configuration: "
        f"{SETTING_LABELS[key]} is not below {SETTING_LABELS[upper_key]} and can thus never occur",
    )


def _confirmed(key: str, value: int) -> Diagnostic:
    return Diagnostic("verbose", f"Configuration of {SETTING_LABELS[key]} threshold set to {value}")
