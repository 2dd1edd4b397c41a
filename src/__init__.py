"""Linite — install command generation engine."""

__version__ = "0.1.0"
