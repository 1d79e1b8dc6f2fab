"""Offline lookup of tldr pages from a local cache."""

__version__ = "0.1.0"
