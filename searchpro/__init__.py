"""Debounced, cached search suggestions."""

__version__ = "0.1.0"
