"""Response cache and nutrition backend companion server."""

__version__ = "1.0.0"
