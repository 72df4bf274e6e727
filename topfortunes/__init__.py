"""Bounded top-K selection of scored submissions into fortune files."""

__version__ = "1.0.0"
