"""Scrap-aware cutting plans for linear stock material."""

__version__ = "0.1.0"
