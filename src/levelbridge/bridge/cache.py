"""Thread-safe holder for threshold settings and their resolved snapshot."""

from __future__ import annotations

import logging
import threading

from levelbridge.constants.config import DIAGNOSTIC_LOGGER_NAME
from levelbridge.model import Diagnostic, ResolvedThresholds, SeverityTier, ThresholdConfig, ThresholdSetting
from levelbridge.severity import DEFAULT_SCHEME, LevelLookup, LevelScheme, classify, lookup_for_scheme, resolve

logger = logging.getLogger(DIAGNOSTIC_LOGGER_NAME)

DIAGNOSTIC_LEVELS: dict[str, int] = {
    "warning": logging.WARNING,
    "info": logging.INFO,
    "verbose": logging.DEBUG,
}


class ThresholdCache:
    """Owns the threshold config and publishes resolved thresholds as one snapshot.

    The config, the level scheme and the registry lookup are only changed
    together under the lock, and every change drops the snapshot. Readers
    take the published snapshot without locking; only a stale snapshot makes
    a reader take the lock and resolve. Diagnostics from a resolution are
    logged once, after the lock is released.

    Without an explicit ``lookup`` the cache uses the registry that pairs
    with its scheme and follows scheme changes made through :meth:`replace`.
    """

    def __init__(
        self,
        config: ThresholdConfig | None = None,
        scheme: LevelScheme = DEFAULT_SCHEME,
        lookup: LevelLookup | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._config = config if config is not None else ThresholdConfig()
        self._scheme = scheme
        self._custom_lookup = lookup is not None
        self._lookup = lookup if lookup is not None else lookup_for_scheme(scheme)
        self._snapshot: ResolvedThresholds | None = None

    @property
    def config(self) -> ThresholdConfig:
        with self._lock:
            return self._config

    @property
    def scheme(self) -> LevelScheme:
        with self._lock:
            return self._scheme

    @property
    def lookup(self) -> LevelLookup:
        with self._lock:
            return self._lookup

    @property
    def is_resolved(self) -> bool:
        return self._snapshot is not None

    def get(self, key: str) -> ThresholdSetting:
        """Return the parsed setting for a tier name or alias."""
        with self._lock:
            return self._config.get(key)

    def set(self, key: str, raw: str | int | None) -> None:
        """Replace one tier's setting; ``key`` may be any tier alias."""
        with self._lock:
            self._config = self._config.with_setting(key, raw)
            self._snapshot = None

    def replace(
        self,
        config: ThresholdConfig,
        scheme: LevelScheme | None = None,
        lookup: LevelLookup | None = None,
    ) -> None:
        """Swap in a new config, and optionally scheme and lookup, in one step."""
        with self._lock:
            self._config = config
            if lookup is not None:
                self._lookup = lookup
                self._custom_lookup = True
            if scheme is not None:
                self._scheme = scheme
                if not self._custom_lookup:
                    self._lookup = lookup_for_scheme(scheme)
            self._snapshot = None

    def thresholds(self) -> ResolvedThresholds:
        """Return current thresholds, resolving first if anything changed."""
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        diagnostics: tuple[Diagnostic, ...] = ()
        with self._lock:
            snapshot = self._snapshot
            if snapshot is None:
                resolution = resolve(self._config, self._lookup, self._scheme)
                snapshot = resolution.thresholds
                diagnostics = resolution.diagnostics
                self._snapshot = snapshot

        _log_diagnostics(diagnostics)
        return snapshot

    def classify(self, level_value: int) -> SeverityTier:
        """Classify ``level_value`` against the current thresholds."""
        return classify(level_value, self.thresholds())


def _log_diagnostics(diagnostics: tuple[Diagnostic, ...]) -> None:
    for diagnostic in diagnostics:
        logger.log(DIAGNOSTIC_LEVELS[diagnostic.severity], diagnostic.message)
