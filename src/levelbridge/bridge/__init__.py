"""Bridge between ``logging`` and a five-tier log sink."""

from .cache import ThresholdCache
from .handler import SinkHandler, message_source, parse_line_number

__all__ = ["SinkHandler", "ThresholdCache", "message_source", "parse_line_number"]
