"""Widgets, layouts and an in-memory character-cell screen for terminal user interfaces."""

__version__ = "0.1.0"