"""levelbridge: forward Python logging records into a five-tier log sink."""

__version__ = "0.3.0"
