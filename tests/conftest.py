"""Shared pytest fixtures for level registries and sinks."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from levelbridge.constants.levels import DEFAULT_LEVEL_VALUES
from levelbridge.severity import LevelLookup, mapping_lookup
from levelbridge.sinks import MemorySink


@pytest.fixture()
def default_lookup() -> LevelLookup:
    """Return a lookup over the well-known default level table."""
    return mapping_lookup(DEFAULT_LEVEL_VALUES)


@pytest.fixture()
def empty_lookup() -> LevelLookup:
    """Return a lookup with no registered levels at all."""
    return mapping_lookup({})


@pytest.fixture()
def memory_sink() -> MemorySink:
    return MemorySink()


@pytest.fixture()
def isolated_logger(request: pytest.FixtureRequest) -> Iterator[logging.Logger]:
    """Yield a non-propagating logger with no handlers, cleaned up afterwards."""
    logger = logging.getLogger(f"levelbridge.tests.{request.node.name}")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
