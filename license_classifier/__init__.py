"""Dependency license classification and registry enrichment."""

__version__ = "0.1.0"
