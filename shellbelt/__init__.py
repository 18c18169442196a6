"""Shellbelt - personal interactive-shell helpers."""

__version__ = "0.3.0"
