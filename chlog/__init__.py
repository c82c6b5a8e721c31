"""Conventional-commit changelog rendering and merging."""

__version__ = "0.1.0"
