"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace

from levelbridge.bridge import ThresholdCache
from levelbridge.config import BridgeSettings, load_config, validate_config_file
from levelbridge.constants.levels import INTEGER_SETTING_PATTERN, SETTING_ALIASES
from levelbridge.exceptions import ConfigError
from levelbridge.exceptions.validation import format_errors
from levelbridge.reporting import classification_to_dict, render_classification, render_resolution, resolution_to_dict
from levelbridge.severity import lookup_for_scheme, resolve


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_resolve(args: argparse.Namespace) -> int:
    """Print the thresholds the effective configuration resolves to."""
    settings = _settings_from_args(args)
    if settings is None:
        return 2

    scheme = settings.scheme
    resolution = resolve(settings.thresholds, lookup_for_scheme(scheme), scheme)
    if args.format == "json":
        payload = resolution_to_dict(resolution, settings.thresholds, scheme.name)
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        print(render_resolution(resolution, settings.thresholds, scheme.name, verbose=args.verbose))
    return 0


def handle_classify(args: argparse.Namespace) -> int:
    """Print the sink tier of each given level value or level name."""
    settings = _settings_from_args(args)
    if settings is None:
        return 2

    scheme = settings.scheme
    lookup = lookup_for_scheme(scheme)
    cache = ThresholdCache(settings.thresholds, scheme, lookup)

    rows: list[tuple[str, int, str]] = []
    for text in args.levels:
        if INTEGER_SETTING_PATTERN.match(text):
            value = int(text)
        else:
            found = lookup(text)
            if found is None:
                raise ConfigError(f"unknown level name {text!r} for scheme {scheme.name}")
            value = found
        rows.append((text, value, cache.classify(value).label))

    if args.format == "json":
        print(json.dumps(classification_to_dict(rows), indent=2, sort_keys=True))
    else:
        print(render_classification(rows))
    return 0


def apply_overrides(settings: BridgeSettings, scheme: str | None, overrides: list[str]) -> BridgeSettings:
    """Return settings with ``--scheme`` and ``--set TIER=VALUE`` flags applied."""
    thresholds = settings.thresholds
    for item in overrides:
        key, sep, value = item.partition("=")
        key = key.strip().lower()
        if not sep or key not in SETTING_ALIASES:
            raise ConfigError(f"--set expects TIER=VALUE with TIER one of {sorted(SETTING_ALIASES)}, got {item!r}")
        thresholds = thresholds.with_setting(key, value.strip())

    updated = replace(settings, thresholds=thresholds)
    if scheme is not None:
        updated = replace(updated, scheme_name=scheme)
    return updated


def _settings_from_args(args: argparse.Namespace) -> BridgeSettings | None:
    """Validate, load and override settings; ``None`` after reporting errors."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return None
    settings = load_config(args.root, args.config)
    return apply_overrides(settings, args.scheme, args.overrides)
