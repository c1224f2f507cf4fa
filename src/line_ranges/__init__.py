"""Canonical-form arithmetic over 1-based, half-open line ranges."""

__all__ = [
    "ranges",
    "text",
    "runtime",
]

__version__ = "0.1.0"
