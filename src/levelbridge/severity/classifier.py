"""Map a numeric level value onto a sink tier."""

from __future__ import annotations

from levelbridge.model import ResolvedThresholds, SeverityTier


def classify(level_value: int, thresholds: ResolvedThresholds) -> SeverityTier:
    """Return the tier whose threshold band contains ``level_value``.

    The highest tier whose threshold is met wins, so equal thresholds favour
    the more severe tier. Low bands are tested first since most events are
    low severity.
    """
    if level_value < thresholds.verbose_min:
        return SeverityTier.SUPPRESSED
    if level_value < thresholds.info_min:
        return SeverityTier.VERBOSE
    if level_value < thresholds.warn_min:
        return SeverityTier.INFORMATION
    if level_value < thresholds.error_min:
        return SeverityTier.WARNING
    if level_value < thresholds.critical_min:
        return SeverityTier.ERROR
    return SeverityTier.CRITICAL
