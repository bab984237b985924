"""Config data model for the bridge."""

from __future__ import annotations

from dataclasses import dataclass, field

from levelbridge.constants.config import DEFAULT_END_SESSION_ON_CLOSE, SCHEME_DEFAULT
from levelbridge.model import ThresholdConfig
from levelbridge.severity import LevelScheme, scheme_by_name


@dataclass(frozen=True)
class BridgeSettings:
    """Resolved bridge settings from ``levelbridge.yaml``.

    ``scheme_name`` is ``None`` when the file does not choose a scheme, so a
    handler keeps the scheme it was built with.
    """

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    end_session_on_close: bool = DEFAULT_END_SESSION_ON_CLOSE
    scheme_name: str | None = None

    @property
    def scheme(self) -> LevelScheme:
        """Level scheme selected by ``scheme_name``, falling back to the default scheme."""
        return scheme_by_name(self.scheme_name or SCHEME_DEFAULT)
