"""Tests for level registries and bundled schemes."""

from __future__ import annotations

import logging

import pytest

from levelbridge.exceptions import ConfigError
from levelbridge.severity import (
    DEFAULT_SCHEME,
    STDLIB_SCHEME,
    default_level_lookup,
    lookup_for_scheme,
    mapping_lookup,
    scheme_by_name,
    stdlib_level_lookup,
)


def test_stdlib_lookup_is_case_insensitive_for_builtin_names() -> None:
    assert stdlib_level_lookup("WARNING") == logging.WARNING
    assert stdlib_level_lookup("Warn") == logging.WARNING
    assert stdlib_level_lookup("fatal") == logging.CRITICAL
    assert stdlib_level_lookup("NoSuchLevel") is None


def test_stdlib_lookup_sees_registered_levels() -> None:
    logging.addLevelName(25, "NOTICE_LEVELBRIDGE_TEST")

    assert stdlib_level_lookup("notice_levelbridge_test") == 25


def test_mapping_lookup_is_exact() -> None:
    lookup = mapping_lookup({"Notice": 50000})

    assert lookup("Notice") == 50000
    assert lookup("notice") is None


def test_default_lookup_covers_well_known_names() -> None:
    assert default_level_lookup("Critical") == 90000
    assert default_level_lookup("Fatal") == 110000
    assert default_level_lookup("All") < 0


def test_scheme_by_name() -> None:
    assert scheme_by_name("default") is DEFAULT_SCHEME
    assert scheme_by_name("stdlib") is STDLIB_SCHEME
    with pytest.raises(ConfigError, match="scheme"):
        scheme_by_name("syslog")


def test_lookup_for_scheme() -> None:
    assert lookup_for_scheme(STDLIB_SCHEME) is stdlib_level_lookup
    assert lookup_for_scheme(DEFAULT_SCHEME) is default_level_lookup
