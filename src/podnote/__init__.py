"""Podnote - turn podcast episode pages into Markdown notes."""

__version__ = "0.1.0"
