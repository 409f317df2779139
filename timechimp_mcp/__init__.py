"""TimeChimp API v2 exposed as tool calls."""

__version__ = "0.7.0"
